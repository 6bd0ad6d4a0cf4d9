"""pmlogctl hints for the THAC0 verbosity system.

Hints are short tips printed on stderr next to a result or an error.
Each shows at most once per OutputManager.

Import this module to register the hints with the global registry.
"""

from pmlogctl.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='cli.help',
        message='pmlogctl: Use -help for usage information.',
        context={'error'},
        min_level=0,
        category='cli',
    ),
    Hint(
        id='logkv.quoting',
        message=('  Tip: values are inserted verbatim. For a string value '
                 'quote it: {example}'),
        context={'error'},
        min_level=0,
        category='logkv',
    ),
    Hint(
        id='context.global_alias',
        message="  Tip: the global context '{name}' can be given as '.'",
        context={'verbose'},
        min_level=1,
        category='context',
    ),
    Hint(
        id='set.wildcard',
        message=("  Tip: end a name with '*' to match every context "
                 "starting with it (e.g. '{example}')."),
        context={'error'},
        min_level=0,
        category='set',
    ),
)
