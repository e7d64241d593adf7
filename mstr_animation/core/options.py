"""Validated animation options.

WHY: Options arrive as a loose mapping (possibly camelCase, possibly with
zero placeholders). Everything downstream needs one immutable, checked
config object so no stage has to re-validate numbers before printing them
into CSS.

HOW: AnimationConfig is a frozen pydantic model. ``from_options`` drops
falsy values (so they fall back to defaults), then validates; pydantic
errors are re-raised as InvalidConfig.

RULES:
- Falsy values (0, 0.0, "", None) mean "use the default"; callers pass 0
  as a placeholder and rely on this
- Numeric options must be finite and > 0
- camelCase option names are accepted alongside snake_case
- Unrecognised keys are ignored
- Booleans are not numbers here, even though bool subclasses int
- font_family is written into a <style> block, so CSS/markup control
  characters and comment markers are rejected rather than escaped
- font_family is stripped; a blank family is an error
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from mstr_animation.config import (
    DEFAULT_DURATION_PER_WORD,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
)
from mstr_animation.core.charset import first_invalid_xml_char
from mstr_animation.errors import InvalidConfig

logger = logging.getLogger(__name__)

_FORBIDDEN_FONT_CHARS = frozenset("{};<>&\\")
_CSS_COMMENT_MARKERS = ("/*", "*/")


class AnimationConfig(BaseModel):
    """Immutable rendering options for one generated animation.

    RULES:
    - width / height: SVG viewBox size in pixels; text is centred in it
    - font_size: pixels
    - duration_per_word: seconds each word owns within the shared cycle
    - font_family: CSS font-family value
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    width: float = Field(
        default=DEFAULT_WIDTH,
        gt=0,
        allow_inf_nan=False,
        description="SVG width in pixels.",
    )
    height: float = Field(
        default=DEFAULT_HEIGHT,
        gt=0,
        allow_inf_nan=False,
        description="SVG height in pixels.",
    )
    font_size: float = Field(
        default=DEFAULT_FONT_SIZE,
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("font_size", "fontSize"),
        description="Font size in pixels.",
    )
    duration_per_word: float = Field(
        default=DEFAULT_DURATION_PER_WORD,
        gt=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("duration_per_word", "durationPerWord", "duration"),
        description="Seconds each word is allotted in the cycle.",
    )
    font_family: str = Field(
        default=DEFAULT_FONT_FAMILY,
        min_length=1,
        validation_alias=AliasChoices("font_family", "fontFamily"),
        description="CSS font-family value for every word.",
    )

    @field_validator("width", "height", "font_size", "duration_per_word", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("expected a number, got {!r}".format(value))
        return value

    @field_validator("font_family")
    @classmethod
    def _reject_markup_characters(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("font family may not be blank")
        bad = sorted(set(value) & _FORBIDDEN_FONT_CHARS)
        bad.extend(marker for marker in _CSS_COMMENT_MARKERS if marker in value)
        invalid = first_invalid_xml_char(value)
        if invalid is not None:
            bad.append(invalid)
        if bad:
            raise ValueError(
                "font family may not contain {}".format(" ".join(repr(c) for c in bad))
            )
        return value

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> AnimationConfig:
        """Build a config from a caller-supplied options mapping.

        WHY: This is the only entry point the pipeline uses, so the
        falsy-means-default rule and the error translation live in one
        place.

        HOW: Keeps only truthy values, validates the rest with pydantic,
        and wraps any ValidationError in InvalidConfig.

        Args:
            options: Mapping of option names to values, or None.

        Returns:
            A frozen AnimationConfig.

        Raises:
            InvalidConfig: If any supplied value is negative, non-finite,
                of the wrong type, or an unsafe font family.
        """
        supplied = {key: value for key, value in (options or {}).items() if value}
        try:
            config = cls.model_validate(supplied)
        except ValidationError as exc:
            details = "; ".join(
                "{}: {}".format(".".join(str(part) for part in err["loc"]), err["msg"])
                for err in exc.errors()
            )
            raise InvalidConfig("Invalid animation options: {}".format(details)) from exc

        logger.debug("Animation config: %s", config)
        return config
