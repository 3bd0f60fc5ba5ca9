"""Maps raw style tags onto the closed set of rendering families."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .config import GeneratorConfig
from .errors import UnknownStyleError
from .models import Classification


@dataclass(frozen=True)
class StyleRule:
    """One row of the style classification table."""

    tag: str
    family: str
    feature: Optional[str] = None
    prefixed: bool = False


_FIXED_RULES: tuple[StyleRule, ...] = (
    StyleRule(tag="fas", family="fas"),
    StyleRule(tag="fab", family="fab", feature="icons-fab"),
    StyleRule(tag="far", family="far", feature="icons-far"),
    StyleRule(tag="", family="plain"),
)


def style_rules(config: GeneratorConfig) -> Dict[str, StyleRule]:
    """Return the effective table, keyed by raw tag, for a configuration."""
    rules = {rule.tag: rule for rule in _FIXED_RULES}
    rules[config.pf_tag] = StyleRule(tag=config.pf_tag, family="pf", prefixed=True)
    return rules


def classify(style_tag: str, identity_key: str, config: GeneratorConfig) -> Classification:
    """Classify one descriptor's style tag.

    Raises ``UnknownStyleError`` for tags outside the table; the caller must
    abort the run rather than skip the icon.
    """
    rule = style_rules(config).get(style_tag)
    if rule is None:
        raise UnknownStyleError(style_tag, identity_key)

    rendered_class = identity_key
    if rule.prefixed and config.pf_prefix:
        rendered_class = f"{config.pf_prefix}-{identity_key}"
    return Classification(family=rule.family, feature=rule.feature, rendered_class=rendered_class)


def describe_styles(config: GeneratorConfig) -> List[str]:
    """Human-readable lines describing the classification table."""
    lines: List[str] = []
    for rule in style_rules(config).values():
        tag = f'"{rule.tag}"'
        feature = rule.feature or "-"
        rendered = "<key>"
        if rule.prefixed and config.pf_prefix:
            rendered = f"{config.pf_prefix}-<key>"
        lines.append(f"{tag:<10} family={rule.family:<6} feature={feature:<10} class={rendered}")
    return lines


__all__ = ["StyleRule", "classify", "describe_styles", "style_rules"]
