"""Tool variant profiles and their usage text."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .constants import (
    ENV_CONTEXT_FALLBACK,
    ENV_IGNORE_PICKER,
    ENV_NAMESPACE_USE_QUERY,
)


class ToolVariant(BaseModel):
    """One of the two sibling tools sharing the argument engine."""

    model_config = ConfigDict(frozen=True)

    name: str
    command: str
    item_noun: str
    supports_unset: bool
    supports_force: bool
    fallback_env_var: str
    ignore_picker_env_var: str = ENV_IGNORE_PICKER


CONTEXT_VARIANT = ToolVariant(
    name="context",
    command="kctx",
    item_noun="context",
    supports_unset=True,
    supports_force=False,
    fallback_env_var=ENV_CONTEXT_FALLBACK,
)

NAMESPACE_VARIANT = ToolVariant(
    name="namespace",
    command="kns",
    item_noun="namespace",
    supports_unset=False,
    supports_force=True,
    fallback_env_var=ENV_NAMESPACE_USE_QUERY,
)


def _usage_rows(variant: ToolVariant) -> list[tuple[str, str]]:
    noun = variant.item_noun
    rows = [
        ("", f"list the {noun}s"),
        ("<NAME>", f"switch to {noun} <NAME>"),
    ]
    if variant.supports_force:
        rows.append(("<NAME> -f, --force", f"switch to {noun} <NAME> even if it doesn't exist"))
    rows.extend([
        ("-", f"switch to the previous {noun}"),
        ("-c, --current", f"show the current {noun} name"),
        ("<NEW_NAME>=<NAME>", f"rename {noun} <NAME> to <NEW_NAME>"),
        ("<NEW_NAME>=.", f"rename the current {noun} to <NEW_NAME>"),
    ])
    if variant.supports_unset:
        rows.append(("-u, --unset", f"unset the current {noun}"))
    rows.extend([
        ("-d <NAME> [<NAME...>]", f"delete {noun} <NAME> ('.' for the current {noun})"),
        ("-h, --help", "show this message"),
        ("-V, --version", "show version"),
    ])
    return rows


def render_usage(variant: ToolVariant) -> str:
    """Render the help text for a variant, listing only the flags it supports."""
    rows = [
        (f"{variant.command} {args}".rstrip(), summary)
        for args, summary in _usage_rows(variant)
    ]
    width = max(len(usage) for usage, _summary in rows)

    lines = ["USAGE:"]
    for usage, summary in rows:
        lines.append(f"  {usage.ljust(width)} : {summary}")
    lines.append("")
    lines.append(
        f"With an interactive terminal and fzf installed, '{variant.command}' with no"
    )
    lines.append(f"arguments opens a picker. Set {variant.fallback_env_var}=1 to use")
    lines.append("extra arguments as picker queries instead of failing.")
    return "\n".join(lines)
