"""Option resolution for date/time formatting.

Turns a loose options mapping into validated per-field values and a
negotiated hour cycle.

Options views:
    The caller's mapping is never written. resolve_defaults() returns a
    ChainMap whose front map is a fresh dict layered over the caller's
    mapping, the same lookup-through/write-to-front behavior as an object
    created with the caller's options as its prototype. A key mapped to None
    counts as absent.

Hour cycle precedence:
    hour12 > hourCycle > locale "hc" extension > pattern default.
    hour12 or hourCycle also evict a disagreeing "hc" extension from the
    resolved locale tag.

Python 3.13+.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Collection, Mapping
from typing import TYPE_CHECKING, TypeAlias

from dtfengine.core.skeleton import PATTERN_ITEMS
from dtfengine.diagnostics import ErrorTemplate, InvalidOptionValueError
from dtfengine.enums import (
    DefaultsOption,
    FormatMatcher,
    HourCycle,
    LocaleMatcher,
    RequiredOption,
)

if TYPE_CHECKING:
    from dtfengine.runtime.locale_resolution import ResolvedLocale

__all__ = [
    "OptionsView",
    "extract_fields",
    "finalize_hour_cycle",
    "get_bool_option",
    "get_format_matcher",
    "get_hour_cycle_option",
    "get_locale_matcher",
    "get_string_option",
    "negotiate_hour_cycle",
    "reconcile_hour_cycle_extension",
    "resolve_defaults",
]

OptionsView: TypeAlias = ChainMap[str, object]

_DATE_FIELDS: tuple[str, ...] = ("weekday", "year", "month", "day")
_TIME_FIELDS: tuple[str, ...] = ("hour", "minute", "second")
_DATE_DEFAULTS: tuple[str, ...] = ("year", "month", "day")
_TIME_DEFAULTS: tuple[str, ...] = ("hour", "minute", "second")


def _needs_default(options: Mapping[str, object], props: tuple[str, ...]) -> bool:
    return all(options.get(prop) is None for prop in props)


def _create_default(options: OptionsView, props: tuple[str, ...]) -> None:
    for prop in props:
        options[prop] = "numeric"


def resolve_defaults(
    options: Mapping[str, object] | None,
    required: RequiredOption,
    defaults: DefaultsOption,
) -> OptionsView:
    """Layer "numeric" field defaults over the caller's options.

    Args:
        options: Caller's options, or None for an empty view
        required: Field group whose presence suppresses defaults
        defaults: Field group that receives defaults

    Returns:
        ChainMap view over the caller's options; defaults live in its front map

    Raises:
        TypeError: If options is neither None nor a mapping

    Examples:
        >>> view = resolve_defaults(None, RequiredOption.ANY, DefaultsOption.DATE)
        >>> dict(view)
        {'year': 'numeric', 'month': 'numeric', 'day': 'numeric'}

        >>> view = resolve_defaults({"hour": "2-digit"}, RequiredOption.ANY, DefaultsOption.DATE)
        >>> dict(view)
        {'hour': '2-digit'}
    """
    if options is None:
        view: OptionsView = ChainMap({})
    elif isinstance(options, Mapping):
        view = ChainMap({}, options)
    else:
        msg = f"options must be a mapping or None, got {type(options).__name__}"
        raise TypeError(msg)

    needs_default = True
    if required in (RequiredOption.DATE, RequiredOption.ANY):
        needs_default = _needs_default(view, _DATE_FIELDS)
    if required in (RequiredOption.TIME, RequiredOption.ANY):
        needs_default = needs_default and _needs_default(view, _TIME_FIELDS)

    if needs_default:
        if defaults in (DefaultsOption.DATE, DefaultsOption.ALL):
            _create_default(view, _DATE_DEFAULTS)
        if defaults in (DefaultsOption.TIME, DefaultsOption.ALL):
            _create_default(view, _TIME_DEFAULTS)

    return view


def _option_text(value: object) -> str:
    # Booleans stringify the way option values are spelled ("true"/"false").
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_string_option(
    options: Mapping[str, object],
    name: str,
    allowed: Collection[str] = (),
    default: str | None = None,
) -> str | None:
    """Read a string option.

    Args:
        options: Options view
        name: Option name
        allowed: Accepted values; empty accepts any string
        default: Returned when the option is absent

    Returns:
        The option as a string, or default if absent

    Raises:
        InvalidOptionValueError: If the value is not in allowed
    """
    value = options.get(name)
    if value is None:
        return default
    text = _option_text(value)
    if allowed and text not in allowed:
        diagnostic = ErrorTemplate.invalid_option_value(name, text, allowed)
        raise InvalidOptionValueError(diagnostic, option_name=name)
    return text


def get_bool_option(options: Mapping[str, object], name: str) -> bool | None:
    """Read a boolean option by truthiness; None if absent."""
    value = options.get(name)
    if value is None:
        return None
    return bool(value)


def get_locale_matcher(options: Mapping[str, object]) -> LocaleMatcher:
    """Read and validate ``localeMatcher`` (default "best fit")."""
    value = get_string_option(
        options, "localeMatcher", tuple(LocaleMatcher), LocaleMatcher.BEST_FIT
    )
    return LocaleMatcher(value)


def get_format_matcher(options: Mapping[str, object]) -> FormatMatcher:
    """Read and validate ``formatMatcher`` (default "best fit")."""
    value = get_string_option(
        options, "formatMatcher", tuple(FormatMatcher), FormatMatcher.BEST_FIT
    )
    return FormatMatcher(value)


def get_hour_cycle_option(options: Mapping[str, object]) -> HourCycle | None:
    """Read and validate ``hourCycle``."""
    value = get_string_option(options, "hourCycle", tuple(HourCycle))
    return HourCycle(value) if value is not None else None


def extract_fields(options: Mapping[str, object]) -> dict[str, str]:
    """Read every field option in declaration order.

    Options are read one by one, so the first invalid field in declaration
    order is the one reported.

    Raises:
        InvalidOptionValueError: If a field value is outside its allowed set
    """
    fields: dict[str, str] = {}
    for item in PATTERN_ITEMS:
        value = get_string_option(options, item.name, item.allowed_values)
        if value is not None:
            fields[item.name] = value
    return fields


def negotiate_hour_cycle(
    hour12: bool | None,
    hour_cycle: HourCycle | None,
    extension_hc: HourCycle | None,
) -> HourCycle | None:
    """Pick the hour cycle before pattern generation.

    Args:
        hour12: The ``hour12`` option; when set it overrides everything
        hour_cycle: The ``hourCycle`` option
        extension_hc: The resolved locale's "hc" extension

    Returns:
        Tentative hour cycle, or None to let the generated pattern decide

    Examples:
        >>> negotiate_hour_cycle(True, HourCycle.H23, None)
        <HourCycle.H12: 'h12'>
        >>> negotiate_hour_cycle(None, None, HourCycle.H11)
        <HourCycle.H11: 'h11'>
    """
    if hour12 is not None:
        return HourCycle.H12 if hour12 else HourCycle.H23
    if hour_cycle is not None:
        return hour_cycle
    return extension_hc


def finalize_hour_cycle(
    negotiated: HourCycle | None,
    hour12: bool | None,
    pattern_hour_cycle: HourCycle | None,
    *,
    has_hour: bool,
) -> HourCycle | None:
    """Settle the hour cycle once the concrete pattern is known.

    Without an hour field the hour cycle is undefined. With ``hour12`` the
    12/24-hour family is fixed but the variant follows the pattern (h11 vs
    h12, h23 vs h24). Otherwise an undefined negotiated cycle falls back to
    the pattern's.
    """
    if not has_hour:
        return None
    if hour12 is not None:
        if hour12:
            return HourCycle.H11 if pattern_hour_cycle is HourCycle.H11 else HourCycle.H12
        return HourCycle.H24 if pattern_hour_cycle is HourCycle.H24 else HourCycle.H23
    if negotiated is None:
        return pattern_hour_cycle
    return negotiated


def reconcile_hour_cycle_extension(
    resolved: ResolvedLocale,
    hour12: bool | None,
    hour_cycle_option: HourCycle | None,
    final_hour_cycle: HourCycle | None,
) -> ResolvedLocale:
    """Drop a disagreeing "hc" extension from the resolved locale.

    Applies only when the caller supplied hour12 or hourCycle; an "hc"
    extension the caller did not override stays in the tag.
    """
    if hour12 is None and hour_cycle_option is None:
        return resolved
    extension_hc = resolved.extensions.get("hc")
    if extension_hc is None or extension_hc == final_hour_cycle:
        return resolved
    return resolved.without_extension("hc")
