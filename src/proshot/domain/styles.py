"""Professional style presets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StylePreset:
    """A named generation instruction for a target photographic setting."""

    id: str
    name: str
    description: str
    prompt: str
    preview_url: str


PROFESSIONAL_STYLES: tuple[StylePreset, ...] = (
    StylePreset(
        id="corporate",
        name="Corporate Studio",
        description="Classic grey backdrop with studio lighting.",
        prompt=(
            "Professional corporate headshot, suit and tie or professional dress, "
            "neutral grey studio backdrop, high-end commercial photography, "
            "sharp focus, 8k resolution, studio lighting."
        ),
        preview_url="https://picsum.photos/seed/corp/400/500",
    ),
    StylePreset(
        id="tech",
        name="Modern Tech Office",
        description="Casual professional in a bright, modern office.",
        prompt=(
            "Modern tech professional headshot, casual professional attire, "
            "blurred office background with glass walls and plants, soft natural "
            "indoor lighting, vibrant and clean aesthetic."
        ),
        preview_url="https://picsum.photos/seed/tech/400/500",
    ),
    StylePreset(
        id="outdoor",
        name="Outdoor Natural",
        description="Soft lighting in a natural park setting.",
        prompt=(
            "Natural light professional headshot, outdoor park setting, soft "
            "sunlight, blurred greenery in the background, professional portrait, "
            "warm and friendly expression."
        ),
        preview_url="https://picsum.photos/seed/park/400/500",
    ),
    StylePreset(
        id="luxury",
        name="Executive Suite",
        description="Elegant boardroom or executive lounge setting.",
        prompt=(
            "Executive headshot, luxury office setting, high-end wooden desk and "
            "leather chair in soft focus background, sophisticated lighting, "
            "powerful and confident professional look."
        ),
        preview_url="https://picsum.photos/seed/exec/400/500",
    ),
)

EDIT_SUGGESTIONS: tuple[str, ...] = (
    "Add a blue blazer",
    "Blur background more",
    "Warmer lighting",
    "Corporate blue tie",
)

_STYLES_BY_ID = {style.id: style for style in PROFESSIONAL_STYLES}


def find_style(style_id: str) -> StylePreset | None:
    """Return the preset with the given id, if any."""
    return _STYLES_BY_ID.get(style_id)
