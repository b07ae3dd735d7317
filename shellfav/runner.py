"""
Execution of saved favorites.

A favorite is handed to the host shell exactly as it was stored, so pipes,
redirections and variable expansion behave as if it had been typed. This runs
arbitrary text with the user's privileges; the only guard is that the text
must already be in the favorites file.
"""

import logging
import subprocess

logger = logging.getLogger(__name__)


def run_favorite(entry):
    """
    Run a favorite through the shell and wait for it to finish.

    Args:
        entry (FavoriteEntry): The matched favorite

    Returns:
        int: The command's exit status
    """
    logger.debug("Executing favorite #%s via shell: %r", entry.index, entry.text)
    completed = subprocess.run(entry.text, shell=True)
    returncode = completed.returncode
    # Killed by a signal: report it the way shells do
    if returncode < 0:
        returncode = 128 - returncode
    return returncode
