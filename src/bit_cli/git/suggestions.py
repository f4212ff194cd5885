# bit_cli/git/suggestions.py
"""
Suggestion-set builders for the completion router.

Branch and file lists are computed once when the session starts; flag
lists are parsed lazily from ``git <command> -h`` and cached, so the
keystroke path only pays for the first lookup of each command.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from bit_cli.completion.router import (
    LONG_FLAG_PREFIX,
    ROOT_KEY,
    Suggestion,
    SuggestionMap,
    freeze_suggestion_map,
)
from bit_cli.git.backend import GitBackend
from bit_cli.git.runner import capture

logger = logging.getLogger(__name__)

# git prints usage for ``-h`` and exits 129
_USAGE_EXIT = 129

_OPTION_LINE = re.compile(r"^\s+(-[^\s].*?)(?:\s{2,}(.*))?$")
_FLAG = re.compile(r"^(--?)(\[no-\])?([\w][\w-]*)")

GIT_COMMANDS: Tuple[Tuple[str, str], ...] = (
    ("status", "Show the working tree status"),
    ("add", "Add file contents to the index"),
    ("commit", "Record changes to the repository"),
    ("checkout", "Switch branches or restore working tree files"),
    ("switch", "Switch branches"),
    ("co", "Switch branches (short for checkout)"),
    ("branch", "List, create, or delete branches"),
    ("merge", "Join two or more development histories together"),
    ("rebase", "Reapply commits on top of another base tip"),
    ("pull", "Fetch from and integrate with another repository or branch"),
    ("push", "Update remote refs along with associated objects"),
    ("fetch", "Download objects and refs from another repository"),
    ("log", "Show commit logs"),
    ("diff", "Show changes between commits, commit and working tree, etc"),
    ("reset", "Reset current HEAD to the specified state"),
    ("restore", "Restore working tree files"),
    ("stash", "Stash the changes in a dirty working directory away"),
    ("tag", "Create, list, delete or verify a tag object"),
    ("remote", "Manage set of tracked repositories"),
    ("show", "Show various types of objects"),
    ("cherry-pick", "Apply the changes introduced by some existing commits"),
    ("revert", "Revert some existing commits"),
    ("clean", "Remove untracked files from the working tree"),
    ("blame", "Show what revision and author last modified each line of a file"),
)

RESET_SUGGESTIONS: Tuple[Tuple[str, str], ...] = (
    ("HEAD~1", "Undo the last commit"),
    ("--soft", "Keep changes staged"),
    ("--mixed", "Keep changes unstaged (default)"),
    ("--hard", "Discard all changes"),
)


def _to_suggestions(pairs: Iterable[Tuple[str, str]]) -> List[Suggestion]:
    return [Suggestion.of(text, desc) for text, desc in pairs]


def git_command_suggestions() -> List[Suggestion]:
    return _to_suggestions(GIT_COMMANDS)


def git_reset_suggestions() -> List[Suggestion]:
    return _to_suggestions(RESET_SUGGESTIONS)


def branch_list_suggestions(git: GitBackend) -> List[Suggestion]:
    current = git.current_branch()
    suggestions = []
    for name in git.list_branches():
        desc = "current branch" if name == current else "branch"
        suggestions.append(Suggestion.of(name, desc))
    return suggestions


def git_add_suggestions(git: GitBackend) -> List[Suggestion]:
    files = [Suggestion.of(path, "changed file") for path in git.changed_files()]
    return [Suggestion.of(".", "Add all changes"), *files]


# ──────────────────────────────────────────────────────────────────────────────
# flag parsing
# ──────────────────────────────────────────────────────────────────────────────
def parse_flag_help(text: str) -> List[Suggestion]:
    """
    Extract flags from git's ``-h`` usage text.

    ``    -q, --quiet   be quiet`` yields ``-q`` and ``--quiet``;
    ``--[no-]track`` yields both ``--track`` and ``--no-track``.
    """
    flags: Dict[str, str] = {}
    for line in text.splitlines():
        match = _OPTION_LINE.match(line)
        if not match:
            continue
        spec, desc = match.group(1), (match.group(2) or "").strip()
        for part in spec.split(","):
            flag = _FLAG.match(part.strip())
            if not flag:
                continue
            dashes, negatable, name = flag.groups()
            flags.setdefault(f"{dashes}{name}", desc)
            if negatable:
                flags.setdefault(f"{dashes}no-{name}", desc)
    return [Suggestion.of(text, desc) for text, desc in flags.items()]


# words typed at the prompt that are shorthand for a real git command
_COMMAND_ALIASES = {"co": "checkout"}


def _static_commands() -> FrozenSet[str]:
    return frozenset(name for name, _ in GIT_COMMANDS if name not in _COMMAND_ALIASES)


@lru_cache(maxsize=8)
def _installed_commands(executable: str) -> FrozenSet[str]:
    """Main porcelain and plumbing commands of *executable*; never git aliases."""
    out = capture(executable, ["--list-cmds=main"])
    if not out:
        return frozenset()
    return frozenset(line.strip() for line in out.splitlines() if line.strip())


def _known_command(command: str, executable: str) -> Optional[str]:
    command = _COMMAND_ALIASES.get(command, command)
    if command in _static_commands() or command in _installed_commands(executable):
        return command
    return None


@lru_cache(maxsize=128)
def _flags_for(command: str, executable: str) -> Tuple[Suggestion, ...]:
    out = capture(executable, [command, "-h"], ok_codes=(0, _USAGE_EXIT))
    if not out:
        logger.debug("No flag help for '%s'", command)
        return ()
    return tuple(parse_flag_help(out))


def flag_suggestions_for_command(
    command: str,
    prefix_style: str,
    executable: str = "git",
) -> List[Suggestion]:
    """
    Flags of ``git <command>``; ``"--"`` keeps only long flags.

    Only git's own commands are asked for ``-h``. Anything else (a git alias
    such as ``!cmd``, a typo) gets no flags and is never run.
    """
    known = _known_command(command, executable)
    if known is None:
        logger.debug("Not a git command, no flag lookup: '%s'", command)
        return []
    flags = _flags_for(known, executable)
    if prefix_style == LONG_FLAG_PREFIX:
        return [s for s in flags if s.text.startswith(LONG_FLAG_PREFIX)]
    return list(flags)


# ──────────────────────────────────────────────────────────────────────────────
# session map
# ──────────────────────────────────────────────────────────────────────────────
def build_suggestion_map(
    git: GitBackend,
    builtin_suggestions: Sequence[Suggestion] = (),
) -> SuggestionMap:
    """Assemble the read-only keyword -> suggestions map for one session."""
    branches = branch_list_suggestions(git)
    raw: Mapping[str, Sequence[Suggestion]] = {
        ROOT_KEY: [*builtin_suggestions, *git_command_suggestions()],
        "checkout": branches,
        "switch": branches,
        "co": branches,
        "merge": branches,
        "add": git_add_suggestions(git),
        "reset": git_reset_suggestions(),
    }
    return freeze_suggestion_map(raw)
