"""Linkifier configuration.

Configuration is an immutable value built once and handed to a Linkifier.
The default detector is constructed here, per configuration, rather than
shared through module state.

Usage:
    config = LinkifyConfig(label_policy=FixedLabel("Click here"))
    linkifier = Linkifier(config)

    # From external sources (settings files, framework props)
    config = LinkifyConfig.from_dict({"detector": "regex", "link_text": "open"})

Thread Safety:
    LinkifyConfig is frozen. Sharing it across threads is safe as long as the
    detector it holds is.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any

from linkify_it import LinkifyIt

from autolinker.detectors import DEFAULT_DETECTOR, DetectionCapability, get_detector
from autolinker.detectors.linkify import LinkifyItDetector
from autolinker.labels import LabelPolicy, as_label_policy

# Keys accepted by from_dict in addition to the field names
_ALIASES = {
    "link_text": "label_policy",
    "linkify": "detector",
}


@dataclass(frozen=True, slots=True)
class LinkifyConfig:
    """Immutable linkifier configuration.

    Attributes:
        detector: Detection capability, or the registered name of one.
            A bare LinkifyIt instance is wrapped in LinkifyItDetector.
            None builds the default ("linkify") detector.
        label_policy: Display text rule for links. A plain string or a
            ``url -> str`` callable is coerced to the matching policy.
            None shows the matched text.
        strict_contracts: Validate detector spans before segmenting and
            raise ContractViolation on bad spans. Meant for tests and
            detector development.

    """

    detector: DetectionCapability | LinkifyIt | str | None = None
    label_policy: LabelPolicy | str | Callable[[str], str] | None = None
    strict_contracts: bool = False

    def __post_init__(self) -> None:
        if self.detector is None:
            object.__setattr__(self, "detector", get_detector(DEFAULT_DETECTOR))
        elif isinstance(self.detector, str):
            object.__setattr__(self, "detector", get_detector(self.detector))
        elif isinstance(self.detector, LinkifyIt):
            object.__setattr__(self, "detector", LinkifyItDetector(self.detector))
        object.__setattr__(self, "label_policy", as_label_policy(self.label_policy))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> LinkifyConfig:
        """Create LinkifyConfig from a mapping.

        Unknown keys are silently ignored. ``link_text`` and ``linkify``
        are accepted as aliases for ``label_policy`` and ``detector``.

        Example:
            >>> config = LinkifyConfig.from_dict({
            ...     "detector": "regex",
            ...     "link_text": "Click here",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.label_policy
            FixedLabel(text='Click here')

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            key = _ALIASES.get(key, key)
            if key in valid_fields:
                filtered[key] = value
        return cls(**filtered)


__all__ = [
    "LinkifyConfig",
]
