"""
SetupCommand implementation for shellfav.
Configures or checks shell tab-completion.
"""

from shellfav.commands.base import Command
from shellfav.errors import ShellFavError, UnsupportedShellError
from shellfav.registry import register_command
from shellfav.utils.shell_utils import (
    SUPPORTED_SHELLS, configure, detect_shell, get_rc_path, is_configured, validate_shell
)


@register_command
class SetupCommand(Command):
    """Command to install tab-completion into the shell's startup file."""

    name = 'setup'
    description = 'Set up shell tab-completion'

    def __init__(self, store=None, environ=None):
        super().__init__(store)
        self.environ = environ

    @classmethod
    def register_arguments(cls, parser):
        """Register command-specific arguments."""
        parser.add_argument(
            '--check',
            action='store_true',
            help='Only report whether completion is configured (exit 1 if not)'
        )
        parser.add_argument(
            '--shell',
            metavar='NAME',
            help=f'Shell to configure instead of the detected one ({", ".join(SUPPORTED_SHELLS)})'
        )

    def _resolve_shell(self, requested):
        shell = requested or detect_shell(self.environ)
        if shell is None:
            raise UnsupportedShellError("Could not detect your shell.")
        return validate_shell(shell)

    def execute(self, args):
        """Execute setup command."""
        try:
            shell = self._resolve_shell(args.shell)
            rc_path = get_rc_path(shell, self.environ)

            if args.check:
                if is_configured(shell, self.environ):
                    self.print_success(f"Completion is configured for {shell} in {rc_path}")
                    return 0
                print(f"Completion is not configured for {shell}.")
                print("Run 'fav setup' to configure it.")
                return 1

            if configure(shell, self.environ):
                self.print_success(f"Completion for {shell} added to {rc_path}")
                print(f"Restart your shell or run: source {rc_path}")
            else:
                print(f"Completion for {shell} is already configured in {rc_path}")
            return 0
        except ShellFavError as e:
            return self.print_error(e)
