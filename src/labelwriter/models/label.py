"""Label stock presets."""

from pydantic import BaseModel, ConfigDict

from labelwriter.errors import ConfigError


class LabelSpec(BaseModel):
    """Pixel dimensions of a label image in landscape orientation (300 dpi)."""

    model_config = ConfigDict(frozen=True)

    title: str
    image_width: int
    image_height: int


# DYMO 99010 (S0722370) and compatible stock
DYMO_LABELS: dict[str, LabelSpec] = {
    "89mm x 28mm": LabelSpec(title="89mm x 28mm", image_width=964, image_height=300),
    "89mm x 36mm": LabelSpec(title="89mm x 36mm", image_width=964, image_height=390),
    "54mm x 25mm": LabelSpec(title="54mm x 25mm", image_width=584, image_height=270),
}


def get_label(title: str) -> LabelSpec:
    """Look up a label preset by title.

    Raises:
        ConfigError: If no preset has the given title.
    """
    try:
        return DYMO_LABELS[title]
    except KeyError:
        known = ", ".join(DYMO_LABELS)
        raise ConfigError(f"Unknown label '{title}', known labels are: {known}") from None
