"""Validation rules for the viewer configuration supplied by the host."""

from __future__ import annotations

import re
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Tuple, TypeGuard

from .schema import ViewerConfig
from .urls import is_valid_url, is_valid_url_with_placeholder

__all__ = [
    "ValidationError",
    "Rule",
    "ConfigValidator",
    "validate_config",
]

MAX_LOAD_DELAY_MS = 10000

_RTV_PIN_RE = re.compile(r"[0-9]{15}")


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


@dataclass(frozen=True)
class Rule:
    """One independent check over the configuration mapping.

    ``check`` returns True when the mapping passes. ``path`` names the field
    the failure is reported against.
    """

    path: str
    message: str
    check: Callable[[Mapping[str, Any]], bool]

    def passes(self, config: Mapping[str, Any]) -> bool:
        # A value whose truth test or comparison raises fails the rule.
        try:
            return bool(self.check(config))
        except Exception:
            return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _in_range(value: Any, low: float, high: float | None = None) -> bool:
    if not _is_number(value):
        return False
    if value < low:
        return False
    return high is None or not value > high


def _optional(key: str, predicate: Callable[[Any], bool]) -> Callable[[Mapping[str, Any]], bool]:
    # Falsy values (0, "", False, None) count as unset and are not checked.
    def check(config: Mapping[str, Any]) -> bool:
        value = config.get(key)
        return not value or predicate(value)

    return check


def _requires(key: str, dependency: str) -> Callable[[Mapping[str, Any]], bool]:
    def check(config: Mapping[str, Any]) -> bool:
        return bool(config.get(dependency)) or not config.get(key)

    return check


def _excludes(key: str, other: str) -> Callable[[Mapping[str, Any]], bool]:
    def check(config: Mapping[str, Any]) -> bool:
        return not (config.get(key) and config.get(other))

    return check


def _is_rtv_pin(value: Any) -> bool:
    return isinstance(value, str) and _RTV_PIN_RE.fullmatch(value) is not None


class ConfigValidator:
    """Validate a viewer configuration against the ``ViewerConfig`` rules.

    ``is_valid`` is the boolean entry point and stops at the first failing
    rule. ``validate`` evaluates every rule and reports each failure, so
    ``is_valid(c)`` holds exactly when ``validate(c)`` is empty.
    """

    _ROOT_SCHEMA = ViewerConfig

    RULES: Tuple[Rule, ...] = (
        Rule(
            "relayPageURL",
            "Expected an absolute URL",
            lambda config: is_valid_url(config.get("relayPageURL")),
        ),
        Rule(
            "useOpaqueOrigin",
            "Expected bool",
            lambda config: isinstance(config.get("useOpaqueOrigin"), bool),
        ),
        Rule(
            "imageProxyURL",
            "Expected an absolute URL (a %s placeholder is allowed)",
            _optional("imageProxyURL", is_valid_url_with_placeholder),
        ),
        Rule(
            "xhrProxyURL",
            "Expected an absolute URL",
            _optional("xhrProxyURL", is_valid_url),
        ),
        Rule(
            "templateProxyURL",
            "Requires xhrProxyURL to be set",
            _requires("templateProxyURL", "xhrProxyURL"),
        ),
        Rule(
            "templateProxyURL",
            "Expected an absolute URL",
            _optional("templateProxyURL", is_valid_url),
        ),
        Rule(
            "transformTemplateProxyOutput",
            "Requires templateProxyURL to be set",
            _requires("transformTemplateProxyOutput", "templateProxyURL"),
        ),
        Rule(
            "linkRedirectURL",
            "Expected an absolute URL (a %s placeholder is allowed)",
            _optional("linkRedirectURL", is_valid_url_with_placeholder),
        ),
        Rule(
            "rtvPin",
            "Expected a string of exactly 15 digits",
            _optional("rtvPin", _is_rtv_pin),
        ),
        Rule(
            "runtimeCDN",
            "Expected an absolute URL",
            _optional("runtimeCDN", is_valid_url),
        ),
        Rule(
            "failOnLoadErrorAfter",
            f"Expected a number between 0 and {MAX_LOAD_DELAY_MS}",
            _optional("failOnLoadErrorAfter", lambda v: _in_range(v, 0, MAX_LOAD_DELAY_MS)),
        ),
        Rule(
            "loadTimeout",
            f"Expected a number between 0 and {MAX_LOAD_DELAY_MS}",
            _optional("loadTimeout", lambda v: _in_range(v, 0, MAX_LOAD_DELAY_MS)),
        ),
        Rule(
            "rtvPin",
            "Must not be set together with runtimeCDN",
            _excludes("rtvPin", "runtimeCDN"),
        ),
        Rule(
            "maximumAMPSize",
            "Expected a non-negative number",
            _optional("maximumAMPSize", lambda v: _in_range(v, 0)),
        ),
    )

    @classmethod
    def is_valid(cls, config: Any) -> TypeGuard[ViewerConfig]:
        """Return True if ``config`` satisfies every rule."""
        if not isinstance(config, MappingABC):
            return False
        return all(rule.passes(config) for rule in cls.RULES)

    @classmethod
    def validate(cls, config: Any) -> List[ValidationError]:
        """Validate a configuration mapping and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [
                ValidationError(
                    path="<root>",
                    message=f"Expected a mapping compatible with {cls._ROOT_SCHEMA.__name__}",
                )
            ]
        return [
            ValidationError(path=rule.path, message=rule.message)
            for rule in cls.RULES
            if not rule.passes(config)
        ]

    @classmethod
    def validate_or_raise(cls, config: Any) -> None:
        """Validate the configuration and raise ValueError on failure."""
        errors = cls.validate(config)
        if errors:
            details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
            raise ValueError(f"Configuration validation failed:\n{details}")


def validate_config(config: Any) -> TypeGuard[ViewerConfig]:
    """Report whether ``config`` is a valid ``ViewerConfig``.

    Never raises and never modifies ``config``. Falsy optional values such as
    ``0`` or ``""`` are treated as unset, so ``loadTimeout=0`` is accepted
    without a range check.
    """
    return ConfigValidator.is_valid(config)
