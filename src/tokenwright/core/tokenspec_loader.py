"""
TokenSpec persistence layer.

Handles reading and writing token configurations to tokenspec.yaml in
the project root. A TokenSpec holds everything one generation pass
needs: palettes, naming convention, semantic groups, and modifiers.

Default location: {project_root}/tokenspec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ErrorContext, TokenSpecError
from .generator import generate_all_tokens
from .ir.naming import NamingConfig
from .ir.semantic import SemanticGroup, SemanticVariant
from .ir.tokens import GenerationResult
from .ir.tokenspec import TokenSpecMeta, TokenSpecYAML
from .library import get_library_palette
from .oklch import is_valid_hex

logger = logging.getLogger(__name__)

TOKENSPEC_FILE = "tokenspec.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_tokenspec_path(project_root: Path) -> Path:
    """Get the tokenspec.yaml file path."""
    return project_root / TOKENSPEC_FILE


def tokenspec_exists(project_root: Path) -> bool:
    """Check if a tokenspec.yaml exists in the project."""
    return get_tokenspec_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def load_tokenspec(project_root: Path, *, use_defaults: bool = True) -> TokenSpecYAML:
    """Load TokenSpec from tokenspec.yaml.

    Args:
        project_root: Root directory of the project.
        use_defaults: If True, return the default TokenSpec when the file
            doesn't exist or is empty.

    Returns:
        TokenSpecYAML instance.

    Raises:
        TokenSpecError: If the file doesn't exist (when use_defaults=False)
            or is invalid.
    """
    tokenspec_path = get_tokenspec_path(project_root)

    if not tokenspec_path.exists():
        if use_defaults:
            logger.debug("No tokenspec.yaml found, using defaults")
            return create_default_tokenspec()
        raise TokenSpecError(f"TokenSpec not found: {tokenspec_path}")

    try:
        data = yaml.safe_load(tokenspec_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise TokenSpecError(f"Invalid YAML: {e}", ErrorContext(source=tokenspec_path)) from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty tokenspec.yaml at {tokenspec_path}, using defaults")
            return create_default_tokenspec()
        raise TokenSpecError("Empty or invalid YAML", ErrorContext(source=tokenspec_path))

    if not isinstance(data, dict):
        raise TokenSpecError(
            f"Expected a mapping at the top level, got {type(data).__name__}",
            ErrorContext(source=tokenspec_path),
        )

    try:
        return TokenSpecYAML.model_validate(data)
    except ValidationError as e:
        raise TokenSpecError(
            f"Invalid TokenSpec schema: {e}", ErrorContext(source=tokenspec_path)
        ) from e


def save_tokenspec(project_root: Path, tokenspec: TokenSpecYAML) -> Path:
    """Save TokenSpec to tokenspec.yaml.

    Returns:
        Path to the saved tokenspec.yaml file.
    """
    tokenspec_path = get_tokenspec_path(project_root)

    data: dict[str, Any] = tokenspec.model_dump(mode="json")

    tokenspec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved TokenSpec to {tokenspec_path}")
    return tokenspec_path


# =============================================================================
# Validation
# =============================================================================


class TokenSpecValidationResult:
    """Result of TokenSpec validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return (
            f"TokenSpecValidationResult(errors={len(self.errors)}, warnings={len(self.warnings)})"
        )


def validate_tokenspec(tokenspec: TokenSpecYAML) -> TokenSpecValidationResult:
    """Validate a TokenSpec for semantic correctness.

    Schema-level checks happen on load; this catches cross references
    and configurations that would generate nothing useful.

    Returns:
        TokenSpecValidationResult with errors and warnings.
    """
    result = TokenSpecValidationResult()

    # Palettes
    seen_refs: set[str] = set()
    for i, palette in enumerate(tokenspec.palettes):
        if not is_valid_hex(palette.base_value):
            result.add_error(
                f"palettes[{i}].base_value '{palette.base_value}' is not a valid hex color"
            )
        for j, shade in enumerate(palette.shades):
            if not is_valid_hex(shade.value):
                result.add_error(
                    f"palettes[{i}].shades[{j}].value '{shade.value}' is not a valid hex color"
                )
        if palette.ref in seen_refs:
            result.add_error(f"palettes[{i}]: duplicate palette '{palette.ref}'")
        seen_refs.add(palette.ref)

    # Semantic mapping
    palettes_by_ref = {p.ref: p for p in tokenspec.palettes}
    for gi, group in enumerate(tokenspec.groups):
        for vi, variant in enumerate(group.variants):
            path = f"groups[{gi}].variants[{vi}]"
            if not variant.is_mapped:
                result.add_warning(
                    f"{path}: '{group.name}/{variant.name}' is not mapped to a palette "
                    "and will generate no tokens"
                )
                continue
            palette = palettes_by_ref.get(variant.palette_ref)
            if palette is None:
                result.add_error(f"{path}.palette_ref '{variant.palette_ref}' is not a palette")
                continue
            if variant.shade_index is not None and not (
                0 <= variant.shade_index < len(palette.shades)
            ):
                result.add_warning(
                    f"{path}.shade_index {variant.shade_index} is out of range for "
                    f"'{palette.ref}' ({len(palette.shades)} shades); base value is used"
                )

    # Modifiers
    if tokenspec.states and not any(s.enabled for s in tokenspec.states):
        result.add_warning("states: every state is disabled, no tokens will be generated")
    if tokenspec.scales and not any(s.enabled for s in tokenspec.scales):
        result.add_warning("scales: every scale is disabled, no tokens will be generated")

    return result


# =============================================================================
# Generation
# =============================================================================


def generate_from_tokenspec(tokenspec: TokenSpecYAML) -> GenerationResult:
    """Run one generation pass over a TokenSpec."""
    return generate_all_tokens(
        tokenspec.palettes,
        tokenspec.naming,
        tokenspec.groups,
        tokenspec.states,
        tokenspec.scales,
    )


# =============================================================================
# Scaffolding
# =============================================================================


def _feedback_group() -> SemanticGroup:
    mapping = {"success": "Success", "warning": "Warning", "error": "Danger"}
    variants = []
    for name, collection in mapping.items():
        palette = get_library_palette(collection)
        ref = palette.ref if palette else ""
        variants.append(SemanticVariant(id=f"feedback-{name}", name=name, palette_ref=ref))
    return SemanticGroup(id="feedback", name="feedback", variants=variants)


def create_default_tokenspec(product_name: str | None = None) -> TokenSpecYAML:
    """Create a default TokenSpecYAML.

    Uses the Success, Warning and Danger sample palettes mapped onto a
    ``feedback`` group, with the default naming convention and modifiers.
    """
    palettes = [
        p for p in (get_library_palette(n) for n in ("Success", "Warning", "Danger")) if p
    ]
    return TokenSpecYAML(
        palettes=palettes,
        naming=NamingConfig(),
        groups=[_feedback_group()],
        meta=TokenSpecMeta(product_name=product_name),
    )


def scaffold_tokenspec(
    project_root: Path,
    *,
    product_name: str = "My App",
    overwrite: bool = False,
) -> Path | None:
    """Create a default tokenspec.yaml file.

    Args:
        project_root: Root directory of the project.
        product_name: Product name (used in meta).
        overwrite: If True, overwrite an existing file.

    Returns:
        Path to created file, or None if skipped.
    """
    tokenspec_path = get_tokenspec_path(project_root)

    if tokenspec_path.exists() and not overwrite:
        logger.debug(f"Skipping existing tokenspec: {tokenspec_path}")
        return None

    from tokenwright._version import get_version

    tokenspec = create_default_tokenspec(product_name).model_copy(
        update={
            "meta": TokenSpecMeta(
                product_name=product_name,
                generated_by=f"tokenwright {get_version()}",
            )
        }
    )
    project_root.mkdir(parents=True, exist_ok=True)
    return save_tokenspec(project_root, tokenspec)
