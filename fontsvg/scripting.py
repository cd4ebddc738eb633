"""
fontsvg.scripting - scripting utilities

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys
import os
import logging


def run_main(command, *args, debug=False):
    """
    Run a script command and return its exit status.

    Errors are logged and give status 1; in debug mode they propagate.
    """
    loglevel = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    try:
        command(*args)
    except BrokenPipeError:
        # output piped to e.g. `head`, which has stopped reading
        sys.stdout = os.fdopen(1)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        return 1
    return 0
