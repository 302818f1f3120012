"""Effective option merging for child apps."""

from typing import Any, Iterable, Mapping


def merge_app_options(
    shared: Mapping[str, Any] | None = None,
    declared: Mapping[str, Any] | None = None,
    call: Mapping[str, Any] | None = None,
    *,
    owner: Any = None,
    pull_keys: Iterable[str] = (),
) -> dict[str, Any]:
    """Build the effective options for a child app.

    Shallow merge, lowest to highest precedence: options shared by the
    parent, options declared for this child, `pull_keys` read from `owner`
    at call time, then options passed at the call site.
    """
    effective: dict[str, Any] = {}
    effective.update(shared or {})
    effective.update(declared or {})

    if owner is not None:
        for key in pull_keys:
            effective[key] = _read_owner_value(owner, key)

    effective.update(call or {})
    return effective


def _read_owner_value(owner: Any, key: str) -> Any:
    get_option = getattr(owner, "get_option", None)
    if callable(get_option):
        return get_option(key)
    return getattr(owner, key, None)
