# flashctl/patterns/__init__.py
from importlib import import_module
from typing import Dict, Iterable, Callable, Any

# name -> relative module path, in execution order
_PATTERNS: Dict[str, str] = {
    "continuous": ".continuous",
    "strobe": ".strobe",
    "sos": ".sos",
    "brightness": ".brightness",
}


def list_patterns() -> Iterable[str]:
    return list(_PATTERNS.keys())


def get_pattern(name: str) -> Callable[..., Any]:
    modname = _PATTERNS.get(name)
    if not modname:
        raise ValueError(f"Unknown pattern: {name}")
    mod = import_module(modname, package=__name__)
    fn = getattr(mod, "run", None)
    if not callable(fn):
        raise ValueError(f"Pattern '{name}' has no callable run()")
    return fn


def get_title(name: str) -> str:
    mod = import_module(_PATTERNS[name], package=__name__)
    return mod.TITLE


def run_pattern(name: str, **kwargs):
    return get_pattern(name)(**kwargs)
