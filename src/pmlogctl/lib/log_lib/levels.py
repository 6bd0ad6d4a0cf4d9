"""
THAC0 verbosity level constants for pmlogctl's own console output.

Not to be confused with the severity levels of the logging contexts
being controlled (see pmlogctl.labels). These only decide what the tool
itself prints. The emit rule is:

    message.level <= threshold  ->  message is shown

Level assignments:
    <-- quieter ------------ default ------------ louder -->
    -4    -3     -2       -1       0      1       2      3
    wall  errors warnings silent   info   detail  steps  debug
"""

# Positive levels (diagnostics on stderr, shown with -v/-vv/-vvv)
DEBUG = 3          # Per-entry registry reads, match decisions
STEPS = 2          # Snapshot sizes, encoder progress
DETAIL = 1         # Resolved config, backend in use
INFO = 0           # Normal informational output (stdout)

# Negative levels (-s, -Q/-QQ/-QQQ/-QQQQ)
SILENT = -1        # -s: informational output suppressed
WARNING = -2
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall, exit code only
