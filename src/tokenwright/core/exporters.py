"""
Export generated tokens to stylesheet, config, and interchange formats.

Supported formats: CSS custom properties, SCSS variables, nested JSON,
W3C Design Token Community Group (DTCG) JSON, a Tailwind config, an ES
module, and a Figma Variables collection.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any

from .errors import ExportError
from .foundations import FOUNDATION_SCALES, foundation_tokens_to_css, foundation_tokens_to_dtcg
from .ir.naming import NamingConfig
from .ir.tokens import GeneratedToken

logger = logging.getLogger(__name__)

_CSS_UNSAFE = re.compile(r"[./]")

_RULE = "// =========================================="


class ExportFormat(StrEnum):
    """Output formats for generated tokens."""

    CSS = "css"
    SCSS = "scss"
    JSON = "json"
    DTCG = "dtcg"
    TAILWIND = "tailwind"
    JS = "js"
    FIGMA = "figma"


FILE_EXTENSIONS: dict[ExportFormat, str] = {
    ExportFormat.CSS: ".css",
    ExportFormat.SCSS: ".scss",
    ExportFormat.JSON: ".json",
    ExportFormat.DTCG: ".tokens.json",
    ExportFormat.TAILWIND: ".config.js",
    ExportFormat.JS: ".js",
    ExportFormat.FIGMA: ".figma.json",
}


def _css_name(name: str) -> str:
    return _CSS_UNSAFE.sub("-", name)


def _owner(token: GeneratedToken, fallback: str = "") -> str:
    return token.parts.group or token.parts.component or fallback


def _short_key(token: GeneratedToken, joiner: str) -> str:
    parts = token.parts
    return joiner.join(p for p in (parts.variant, parts.element, parts.scale, parts.state) if p)


def _nest(tree: dict[str, Any], keys: list[str], leaf: dict[str, Any]) -> None:
    node = tree
    for key in keys[:-1]:
        node = node.setdefault(key, {})
    # a name can be both a leaf and the parent of longer names
    existing = node.get(keys[-1])
    if isinstance(existing, dict):
        existing.update(leaf)
    else:
        node[keys[-1]] = leaf


def _parse_format(fmt: ExportFormat | str) -> ExportFormat:
    try:
        return ExportFormat(fmt)
    except ValueError:
        valid = ", ".join(f.value for f in ExportFormat)
        raise ExportError(f"Unknown export format {fmt!r}. Valid formats: {valid}") from None


def _group_tokens(tokens: Sequence[GeneratedToken]) -> dict[str, list[GeneratedToken]]:
    grouped: dict[str, list[GeneratedToken]] = {}
    for token in tokens:
        grouped.setdefault(_owner(token, "tokens"), []).append(token)
    return grouped


# =============================================================================
# Stylesheets
# =============================================================================


def tokens_to_css(
    tokens: Sequence[GeneratedToken], foundations: Iterable[str] = ()
) -> str:
    """Render tokens as CSS custom properties in a ``:root`` block.

    A comment header is emitted whenever the owning group changes, and a
    ``ref`` comment points at the primitive each token resolves to.
    """
    lines = [":root {"]
    last_group = ""
    for token in tokens:
        group = _owner(token)
        if group != last_group:
            if last_group:
                lines.append("")
            variant = f" / {token.parts.variant}" if token.parts.variant else ""
            lines.append(f"  /* {group}{variant} */")
            last_group = group
        comment = f" /* ref: {token.primitive_ref} */" if token.primitive_ref else ""
        lines.append(f"  --{_css_name(token.full_name)}: {token.value};{comment}")
    lines.append("}")
    css = "\n".join(lines) + "\n"

    foundations = list(foundations)
    if foundations:
        css += "\n" + foundation_tokens_to_css(foundations)
    return css


def tokens_to_scss(
    tokens: Sequence[GeneratedToken], foundations: Iterable[str] = ()
) -> str:
    """Render tokens as SCSS variables with a primitive reference header."""
    primitive_refs = list(dict.fromkeys(t.primitive_ref for t in tokens if t.primitive_ref))

    lines = ["// Design Token System", "// Auto-generated", ""]
    if primitive_refs:
        lines += [_RULE, "// PRIMITIVE REFERENCES (from selected palettes)", _RULE]
        lines += [f"// ${_css_name(ref)}" for ref in primitive_refs]
        lines.append("")

    lines += [_RULE, "// SEMANTIC TOKENS", _RULE, ""]

    last_group = ""
    for token in tokens:
        group = _owner(token)
        if group != last_group:
            if last_group:
                lines.append("")
            variant = f": {token.parts.variant}" if token.parts.variant else ""
            lines.append(f"// {group.upper()}{variant}")
            last_group = group
        comment = f" // ref: ${_css_name(token.primitive_ref)}" if token.primitive_ref else ""
        lines.append(f"${_css_name(token.full_name)}: {token.value};{comment}")

    for category in foundations:
        scale = FOUNDATION_SCALES.get(category)  # type: ignore[call-overload]
        if scale is None:
            continue
        lines += ["", f"// {scale.label.upper()}"]
        lines += [f"${t.name}: {t.value};" for t in scale.tokens]

    return "\n".join(lines) + "\n"


# =============================================================================
# JSON formats
# =============================================================================


def generate_json_tokens(
    tokens: Sequence[GeneratedToken], separator: str = "-", foundations: Iterable[str] = ()
) -> dict[str, Any]:
    """Nested token tree split on the naming separator.

    Foundation values, when requested, land under a ``foundation`` key
    as plain ``name -> value`` maps per category.
    """
    tree: dict[str, Any] = {}
    for token in tokens:
        leaf: dict[str, Any] = {"$value": token.value, "$type": "color"}
        if token.primitive_ref:
            leaf["$primitiveRef"] = token.primitive_ref
        _nest(tree, token.full_name.split(separator), leaf)

    foundation_tree: dict[str, Any] = {}
    for category in foundations:
        scale = FOUNDATION_SCALES.get(category)  # type: ignore[call-overload]
        if scale is not None:
            foundation_tree[scale.id.value] = {t.name: t.value for t in scale.tokens}
    if foundation_tree:
        tree["foundation"] = foundation_tree
    return tree


def generate_dtcg_tokens(
    tokens: Sequence[GeneratedToken], separator: str = "-", foundations: Iterable[str] = ()
) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens.

    Args:
        tokens: Generated semantic tokens.
        separator: Separator used to split names into groups.
        foundations: Foundation categories merged in at the top level.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    tree: dict[str, Any] = {}
    for token in tokens:
        leaf: dict[str, Any] = {"$value": token.value, "$type": "color"}
        if token.primitive_ref:
            leaf["$description"] = f"Primitive: {token.primitive_ref}"
        elif token.reference:
            leaf["$description"] = f"Reference: {token.reference}"
        _nest(tree, token.full_name.split(separator), leaf)

    tree.update(foundation_tokens_to_dtcg(foundations))
    return tree


def generate_figma_variables(
    tokens: Sequence[GeneratedToken],
    separator: str = "-",
    collection_name: str = "Semantic Tokens",
) -> dict[str, Any]:
    """Figma Variables collection with one ``Default`` mode.

    Figma groups variables on ``/``, so name segments are re-joined with
    it.
    """
    variables = [
        {
            "name": "/".join(token.full_name.split(separator)),
            "type": "COLOR",
            "value": token.value,
            "description": (
                f"Primitive: {token.primitive_ref}" if token.primitive_ref else ""
            ),
        }
        for token in tokens
    ]
    return {
        "collections": [
            {"name": collection_name, "modes": [{"name": "Default", "variables": variables}]}
        ]
    }


# =============================================================================
# JavaScript
# =============================================================================


def tokens_to_tailwind(tokens: Sequence[GeneratedToken]) -> str:
    """Render a Tailwind config extending ``theme.colors`` per group."""
    lines = [
        "/** @type {import('tailwindcss').Config} */",
        "module.exports = {",
        "  theme: {",
        "    extend: {",
        "      colors: {",
    ]
    for group, group_tokens in _group_tokens(tokens).items():
        values = {_short_key(t, "-"): t.value for t in group_tokens}
        lines.append(f"        '{group}': {{")
        lines += [f"          '{key}': '{value}'," for key, value in values.items()]
        lines.append("        },")
    lines += ["      },", "    },", "  },", "};"]
    return "\n".join(lines)


def tokens_to_js(tokens: Sequence[GeneratedToken]) -> str:
    """Render an ES module exporting a ``tokens`` object per group."""
    lines = ["// Design Token System", "// Auto-generated", "", "export const tokens = {"]
    for group, group_tokens in _group_tokens(tokens).items():
        lines.append(f"  {group}: {{")
        lines += [f"    '{_short_key(t, '_')}': '{t.value}'," for t in group_tokens]
        lines.append("  },")
    lines.append("};")
    return "\n".join(lines) + "\n"


# =============================================================================
# Dispatch
# =============================================================================


def export_tokens(
    tokens: Sequence[GeneratedToken],
    fmt: ExportFormat | str,
    naming: NamingConfig | None = None,
    foundations: Iterable[str] = (),
) -> str:
    """Render tokens in the requested format.

    Args:
        tokens: Generated semantic tokens.
        fmt: Export format name.
        naming: Naming convention; its separator drives JSON nesting.
        foundations: Foundation categories to include (css, scss, json,
            dtcg only).

    Raises:
        ExportError: If the format is not recognised.
    """
    fmt = _parse_format(fmt)
    separator = str((naming or NamingConfig()).separator)
    foundations = list(foundations)
    logger.debug(f"Exporting {len(tokens)} tokens as {fmt.value}")

    if fmt == ExportFormat.CSS:
        return tokens_to_css(tokens, foundations)
    if fmt == ExportFormat.SCSS:
        return tokens_to_scss(tokens, foundations)
    if fmt == ExportFormat.JSON:
        return json.dumps(generate_json_tokens(tokens, separator, foundations), indent=2)
    if fmt == ExportFormat.DTCG:
        return json.dumps(generate_dtcg_tokens(tokens, separator, foundations), indent=2)
    if fmt == ExportFormat.TAILWIND:
        return tokens_to_tailwind(tokens)
    if fmt == ExportFormat.JS:
        return tokens_to_js(tokens)
    return json.dumps(generate_figma_variables(tokens, separator), indent=2)


def export_to_file(
    tokens: Sequence[GeneratedToken],
    fmt: ExportFormat | str,
    output_path: Path,
    naming: NamingConfig | None = None,
    foundations: Iterable[str] = (),
) -> Path:
    """Render tokens and write them to a file.

    Args:
        tokens: Generated semantic tokens.
        fmt: Export format name.
        output_path: Path to write to. Parent directories are created.
        naming: Naming convention.
        foundations: Foundation categories to include.

    Returns:
        Path to the written file.
    """
    content = export_tokens(tokens, fmt, naming, foundations)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {len(tokens)} tokens to {output_path}")
    return output_path


def default_filename(fmt: ExportFormat | str) -> str:
    """Suggested file name for a format, e.g. ``design-tokens.css``."""
    return f"design-tokens{FILE_EXTENSIONS[_parse_format(fmt)]}"
