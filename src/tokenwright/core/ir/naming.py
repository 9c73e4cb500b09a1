"""
Naming convention IR types.

A token name is assembled from an ordered list of slots. The list order
is the segment order of every generated name; the slot ``group`` is only
used to cluster slots for display.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class Separator(StrEnum):
    """Delimiter placed between name segments."""

    DOT = "."
    DASH = "-"
    SLASH = "/"
    UNDERSCORE = "_"


class Casing(StrEnum):
    """Casing applied to each name segment."""

    KEBAB = "kebab"
    CAMEL = "camel"
    SNAKE = "snake"
    NONE = "none"


class SlotGroupId(StrEnum):
    """Display grouping for slots."""

    NAMESPACE = "namespace"
    OBJECT = "object"
    CATEGORY = "category"
    MODIFIERS = "modifiers"


# =============================================================================
# Slots
# =============================================================================


class TokenSlotGroup(BaseModel):
    """Display metadata for a slot group."""

    model_config = ConfigDict(frozen=True)

    id: SlotGroupId
    label: str
    sublabel: str
    description: str


TOKEN_SLOT_GROUPS: tuple[TokenSlotGroup, ...] = (
    TokenSlotGroup(
        id=SlotGroupId.NAMESPACE,
        label="Namespace",
        sublabel="Context",
        description="Define the broad context: system, theme, domain or level.",
    ),
    TokenSlotGroup(
        id=SlotGroupId.OBJECT,
        label="Object",
        sublabel="Where",
        description='Refers to the component, element or group. Defines the "where".',
    ),
    TokenSlotGroup(
        id=SlotGroupId.CATEGORY,
        label="Category",
        sublabel="What",
        description='Defines the type of visual design attribute. Defines the "what".',
    ),
    TokenSlotGroup(
        id=SlotGroupId.MODIFIERS,
        label="Modifiers",
        sublabel="Which / How / When",
        description="Adds purpose with variant, state, scale and mode.",
    ),
)


class TokenSlot(BaseModel):
    """One named position in a token name."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable slot id, e.g. 'component', 'element'")
    group: SlotGroupId = Field(default=SlotGroupId.MODIFIERS, description="Display group")
    label: str = Field(default="", description="Human-readable label")
    description: str = Field(default="", description="What the slot expresses")
    enabled: bool = Field(default=True, description="Disabled slots contribute nothing")
    presets: list[str] = Field(default_factory=list, description="Suggested values")
    selected_example: str = Field(default="", description="Example value for previews")


DEFAULT_TOKEN_SLOTS: tuple[TokenSlot, ...] = (
    # Namespace
    TokenSlot(
        id="system",
        group=SlotGroupId.NAMESPACE,
        label="System",
        description="Identifies the global system",
        enabled=False,
        presets=["das", "ds", "ui", "app", "acme", "mad"],
        selected_example="das",
    ),
    TokenSlot(
        id="tier",
        group=SlotGroupId.NAMESPACE,
        label="Tier",
        description="Level within the system (core, sys, comp)",
        enabled=False,
        presets=["core", "sys", "comp", "ref", "semantic", "theme"],
        selected_example="sys",
    ),
    # Object
    TokenSlot(
        id="component",
        group=SlotGroupId.OBJECT,
        label="Component",
        description="Associated component or semantic group",
        enabled=True,
        presets=[
            "action", "control", "feedback", "surface",
            "accordion", "alert", "avatar", "badge", "breadcrumbs", "button",
            "card", "checkbox", "chips", "dropdown", "input", "list", "menu",
            "modal", "navigation", "pagination", "radio", "select", "slider",
            "snackbar", "switch", "table", "tabs", "tag", "tooltips",
        ],  # fmt: skip
        selected_example="button",
    ),
    TokenSlot(
        id="foundation",
        group=SlotGroupId.OBJECT,
        label="Foundation",
        description="Foundation styles or attributes",
        enabled=False,
        presets=["border", "color", "elevation", "font", "palette", "spacing"],
        selected_example="color",
    ),
    # Category
    TokenSlot(
        id="property",
        group=SlotGroupId.CATEGORY,
        label="Property",
        description="Visual property being styled",
        enabled=True,
        presets=["color", "radius", "width", "size", "opacity", "shadow", "surface"],
        selected_example="color",
    ),
    TokenSlot(
        id="element",
        group=SlotGroupId.CATEGORY,
        label="Element",
        description="Specific part of the component where it applies",
        enabled=True,
        presets=["bg", "body", "heading", "icon", "label", "outline", "overlay", "text"],
        selected_example="bg",
    ),
    # Modifiers
    TokenSlot(
        id="role",
        group=SlotGroupId.MODIFIERS,
        label="Role",
        description="Role or semantic function",
        enabled=True,
        presets=[
            "primary", "secondary", "danger", "success", "info", "warning",
            "neutral", "brand", "link",
        ],  # fmt: skip
        selected_example="primary",
    ),
    TokenSlot(
        id="variant",
        group=SlotGroupId.MODIFIERS,
        label="Variant",
        description="Alternative use case of the component",
        enabled=False,
        presets=["default", "subtle", "subtlest", "bold", "solid", "inverse"],
        selected_example="default",
    ),
    TokenSlot(
        id="state",
        group=SlotGroupId.MODIFIERS,
        label="State",
        description="Interactive state",
        enabled=True,
        presets=[
            "active", "checked", "disabled", "focused", "hovered", "pressed",
            "selected", "visited",
        ],  # fmt: skip
        selected_example="hovered",
    ),
    TokenSlot(
        id="scale",
        group=SlotGroupId.MODIFIERS,
        label="Scale",
        description="Scale, size or ordinal range",
        enabled=True,
        presets=["xs", "sm", "md", "lg", "xl", "subtle", "strong"],
        selected_example="md",
    ),
    TokenSlot(
        id="modifier",
        group=SlotGroupId.MODIFIERS,
        label="Additional Modifier",
        description="Relevant additional detail",
        enabled=False,
        presets=["label", "caption1", "caption2", "soft", "dark"],
        selected_example="label",
    ),
    TokenSlot(
        id="mode",
        group=SlotGroupId.MODIFIERS,
        label="Mode",
        description="Visual mode (light/dark)",
        enabled=False,
        presets=["dark", "light", "high-contrast"],
        selected_example="dark",
    ),
)


class NamingConfig(BaseModel):
    """Naming convention shared by every name-building call in a session."""

    model_config = ConfigDict(frozen=True)

    separator: Separator = Field(default=Separator.DOT, description="Segment delimiter")
    prefix: str = Field(default="", description="Optional prefix prepended to every name")
    casing: Casing = Field(default=Casing.KEBAB, description="Per-segment casing")
    abbreviate: bool = Field(
        default=False,
        description="Abbreviate element names and drop property='color'",
    )
    slots: list[TokenSlot] = Field(
        default_factory=lambda: list(DEFAULT_TOKEN_SLOTS),
        description="Ordered slots; order fixes segment order",
    )

    def get_slot(self, slot_id: str) -> TokenSlot | None:
        """Look up a slot by id."""
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        return None

    def enabled_slot_ids(self) -> list[str]:
        """Ids of enabled slots, in name order."""
        return [slot.id for slot in self.slots if slot.enabled]
