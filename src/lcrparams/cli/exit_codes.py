"""Standard exit codes for the lcrparams CLI.

- 0: Success
- 1: General error, and command line usage errors (the exit status the
     getopt-based fLPSparameters/SEGparameters programs have always used)
- 130: Terminated by SIGINT (128 + 2)
- 143: Terminated by SIGTERM (128 + 15)
"""

EXIT_SUCCESS = 0
EXIT_ERROR = 1  # General/configuration error
EXIT_USAGE = 1  # Command line usage error
EXIT_SIGINT = 130  # 128 + SIGINT(2)
EXIT_SIGTERM = 143  # 128 + SIGTERM(15)
