"""
Shell detection and tab-completion setup for shellfav.

The completion block is appended to the shell's startup file between two
marker lines; the begin marker is what makes configure() idempotent.
"""

import logging
import os
import textwrap
from pathlib import Path

from ..errors import StorageError, UnsupportedShellError

logger = logging.getLogger(__name__)

BEGIN_MARKER = "# >>> shellfav completion >>>"
END_MARKER = "# <<< shellfav completion <<<"

SUBCOMMANDS = ["add", "list", "remove", "setup", "help", "version"]

_BASH_BLOCK = textwrap.dedent(
    """
    _fav_complete() {
        local cur="${COMP_WORDS[COMP_CWORD]}"
        if [ "$COMP_CWORD" -eq 1 ]; then
            local IFS=$'\\n'
            COMPREPLY=( $(compgen -W "$(printf '%s\\n' __SUBCOMMANDS__; fav list --plain 2>/dev/null)" -- "$cur") )
        fi
    }
    complete -o default -F _fav_complete fav
    """
)

_ZSH_BLOCK = textwrap.dedent(
    """
    _fav_complete() {
        local -a choices
        choices=(__SUBCOMMANDS__ ${(f)"$(fav list --plain 2>/dev/null)"})
        if (( CURRENT == 2 )); then
            compadd -Q -- "${choices[@]}"
        else
            _files
        fi
    }
    autoload -Uz compinit && compinit -C
    compdef _fav_complete fav
    """
)

_FISH_BLOCK = textwrap.dedent(
    """
    complete -c fav -f -n '__fish_use_subcommand' -a '__SUBCOMMANDS__'
    complete -c fav -f -n '__fish_use_subcommand' -a '(fav list --plain 2>/dev/null)'
    complete -c fav -n '__fish_seen_subcommand_from setup' -l check -d 'Only check whether completion is configured'
    complete -c fav -n '__fish_seen_subcommand_from setup' -l shell -x -a 'bash zsh fish'
    """
)

COMPLETION_BLOCKS = {
    "bash": _BASH_BLOCK,
    "zsh": _ZSH_BLOCK,
    "fish": _FISH_BLOCK,
}

SUPPORTED_SHELLS = sorted(COMPLETION_BLOCKS)

# Checked in order; these are set inside a running shell but rarely exported
_VERSION_HINTS = [
    ("FISH_VERSION", "fish"),
    ("ZSH_VERSION", "zsh"),
    ("BASH_VERSION", "bash"),
]


def detect_shell(environ=None):
    """
    Guess the user's interactive shell from environment hints.

    Args:
        environ (dict, optional): Environment mapping, defaults to os.environ

    Returns:
        str or None: Shell name such as "bash", or None if nothing matched
    """
    if environ is None:
        environ = os.environ

    for variable, shell in _VERSION_HINTS:
        if environ.get(variable):
            return shell

    login_shell = environ.get("SHELL", "")
    if login_shell:
        return Path(login_shell).name
    return None


def validate_shell(shell):
    """Raise UnsupportedShellError unless completion can be set up for shell."""
    if shell not in COMPLETION_BLOCKS:
        raise UnsupportedShellError(
            f"Unsupported shell: '{shell}'. Supported shells: {', '.join(SUPPORTED_SHELLS)}."
        )
    return shell


def get_rc_path(shell, environ=None):
    """
    Get the startup file that completion is written to.

    Args:
        shell (str): One of SUPPORTED_SHELLS
        environ (dict, optional): Environment mapping, defaults to os.environ

    Returns:
        Path: The rc file path
    """
    if environ is None:
        environ = os.environ
    validate_shell(shell)

    home = Path(environ.get("HOME") or Path.home())
    if shell == "bash":
        return home / ".bashrc"
    if shell == "zsh":
        zdotdir = environ.get("ZDOTDIR")
        return Path(zdotdir).expanduser() / ".zshrc" if zdotdir else home / ".zshrc"

    config_home = environ.get("XDG_CONFIG_HOME")
    base = Path(config_home).expanduser() if config_home else home / ".config"
    return base / "fish" / "config.fish"


def render_completion_block(shell):
    """Return the marker-delimited completion block for a shell."""
    validate_shell(shell)
    body = COMPLETION_BLOCKS[shell].strip("\n").replace("__SUBCOMMANDS__", " ".join(SUBCOMMANDS))
    return f"{BEGIN_MARKER}\n{body}\n{END_MARKER}\n"


def is_configured(shell, environ=None):
    """
    Check whether the completion block is already in the shell's rc file.

    Raises:
        UnsupportedShellError: If the shell is not supported
        StorageError: If the rc file exists but cannot be read
    """
    rc_path = get_rc_path(shell, environ)
    if not rc_path.exists():
        return False
    try:
        content = rc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Could not read {rc_path}: {getattr(exc, 'strerror', None) or exc}") from exc
    return any(line.strip() == BEGIN_MARKER for line in content.splitlines())


def configure(shell, environ=None):
    """
    Append the completion block to the shell's rc file unless it is present.

    Returns:
        bool: True if the block was written, False if it was already there

    Raises:
        UnsupportedShellError: If the shell is not supported
        StorageError: If the rc file cannot be created or written
    """
    if is_configured(shell, environ):
        logger.debug("Completion for %s already configured", shell)
        return False

    rc_path = get_rc_path(shell, environ)
    try:
        rc_path.parent.mkdir(parents=True, exist_ok=True)
        prefix = ""
        if rc_path.exists() and rc_path.stat().st_size > 0:
            with open(rc_path, "rb") as handle:
                handle.seek(-1, 2)
                prefix = "\n" if handle.read(1) == b"\n" else "\n\n"
        with open(rc_path, "a", encoding="utf-8") as handle:
            handle.write(prefix + render_completion_block(shell))
    except OSError as exc:
        raise StorageError(f"Could not write {rc_path}: {exc.strerror or exc}") from exc

    logger.debug("Wrote %s completion block to %s", shell, rc_path)
    return True
