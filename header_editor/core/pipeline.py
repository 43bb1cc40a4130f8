import logging
from typing import Any, Sequence
from starlette.types import ASGIApp
from .header_editor import HeaderEditorMiddleware, KeyMutation, ValuesMutation
from .values import map_all, map_if_single, map_first, map_last

logger = logging.getLogger("header_editor.pipeline")

VALUE_POLICIES = {
    "each": map_all,
    "only": map_if_single,
    "first": map_first,
    "last": map_last,
}

RULE_FIELDS = {"key", "rename", "prefix", "suffix", "values"}
VALUES_FIELDS = {"apply", "prefix", "suffix"}


def _identity(values: Sequence[str]) -> Sequence[str]:
    return values


def use_header_editor(
    app: ASGIApp,
    key: str,
    key_mutation: KeyMutation,
    values_mutation: ValuesMutation | None = None,
) -> ASGIApp:
    """Wrap ``app`` with a header editor; the key mutation is evaluated right away."""
    if app is None:
        raise ValueError("app is required")
    if key is None:
        raise ValueError("key is required")
    if key_mutation is None:
        raise ValueError("key_mutation is required")

    if values_mutation is None:
        values_mutation = _identity
    return HeaderEditorMiddleware(app, key, key_mutation, values_mutation)


def apply_header_rules(app: ASGIApp, rules: list[dict[str, Any]]) -> ASGIApp:
    # wrap in reverse so rules[0] sees the request first
    for rule in reversed(rules):
        key = rule.get("key")
        if not key:
            raise ValueError(f"Header rule without key: {rule}")

        unknown = set(rule) - RULE_FIELDS
        if unknown:
            raise ValueError(f"Unknown fields in header rule for {key!r}: {sorted(unknown)}")

        app = use_header_editor(
            app,
            key,
            _build_key_mutation(rule),
            _build_values_mutation(key, rule.get("values")),
        )
        logger.info(f"Header rule applied: {key!r} -> {app.mutated_key!r}")
    return app


def _build_key_mutation(rule: dict[str, Any]) -> KeyMutation:
    rename = rule.get("rename")
    prefix = rule.get("prefix", "")
    suffix = rule.get("suffix", "")

    if rename is not None and not rename:
        raise ValueError(f"Header rule for {rule['key']!r} has an empty rename")
    if rename is not None and (prefix or suffix):
        raise ValueError(f"Header rule for {rule['key']!r} sets both rename and prefix/suffix")
    if rename is not None:
        return lambda _: rename
    return lambda k: f"{prefix}{k}{suffix}"


def _build_values_mutation(key: str, policy: dict[str, Any] | None) -> ValuesMutation | None:
    if not policy:
        return None

    unknown = set(policy) - VALUES_FIELDS
    if unknown:
        raise ValueError(f"Unknown value fields in header rule for {key!r}: {sorted(unknown)}")

    apply = policy.get("apply", "each")
    combinator = VALUE_POLICIES.get(apply)
    if combinator is None:
        raise ValueError(
            f"Unknown value policy {apply!r} for {key!r}, expected one of {sorted(VALUE_POLICIES)}"
        )

    prefix = policy.get("prefix", "")
    suffix = policy.get("suffix", "")
    return lambda values: combinator(values, lambda v: f"{prefix}{v}{suffix}")
