'''
module name simplifier
collapses runtime-generated class and method names into stable forms
'''

HEX_DIGITS = "0123456789abcdef"
DIGITS = "0123456789"

LAMBDA_TRIGGER = "$$Lambda$"

DYNAMIC_CLASS_GENERATOR_TAGS = ("FastClassBy", "EnhancerBy", "EnhancedBy")

REFLECTION_ACCESSOR_PREFIXES = (
    "sun.reflect.GeneratedConstructorAccessor",
    "sun.reflect.GeneratedMethodAccessor",
    "sun.reflect.GeneratedSerializationConstructorAccessor",
)


def _skip_chars(name: str, start: int, chars: str) -> int:
    end = start
    while end < len(name) and name[end] in chars:
        end += 1
    return end


def simplifySuffixedName(name: str, trigger: str, suffix_chars: str) -> str:
    """
    Remove the run of suffix characters following each trigger occurrence.

    For example, ("foo123bar", "foo", "321") gives "foobar".

    Args:
        name: Text to simplify
        trigger: Substring after which the suffix run is removed
        suffix_chars: Characters forming the removed run

    Returns:
        Simplified text, unchanged if the trigger does not occur
    """
    first = name.find(trigger)
    while first >= 0:
        first += len(trigger)
        last = _skip_chars(name, first, suffix_chars)
        name = name[:first] + name[last:]
        first = name.find(trigger, first)
    return name


def _collapse_generator_tags(name: str) -> str:
    first = name.find("$$")
    while first >= 0:
        start = first + 2
        if name.startswith(DYNAMIC_CLASS_GENERATOR_TAGS, start):
            last = name.find("$$", start)
            if last >= 0 and '.' not in name[start:last]:
                # Re-examine the surviving "$$", another tag may follow it.
                name = name[:start] + name[last + 2:]
                continue
        first = name.find("$$", start)
    return name


def simplifyDynamicClassName(name: str) -> str:
    """
    Collapse "$$<hex>" to "$$" in dynamic class names.

    A "$$FastClassBy...$$" or "$$EnhancerBy...$$" generator tag left in
    front of the collapsed suffix is folded into the same "$$", chained tags
    included, e.g.
    "Bar$$FastClassByCGLIB$$ab12ef34.invoke" -> "Bar$$.invoke".
    """
    return _collapse_generator_tags(simplifySuffixedName(name, "$$", HEX_DIGITS))


def simplifyLambdaName(name: str) -> str:
    """
    Collapse the first "$$Lambda$<digits>.<digits>" to "$$Lambda$".

    The name is returned unchanged unless the exact digits-dot-digits shape
    follows the trigger.
    """
    first = name.find(LAMBDA_TRIGGER)
    if first < 0:
        return name

    first += len(LAMBDA_TRIGGER)
    if first >= len(name) or name[first] not in DIGITS:
        return name

    last = _skip_chars(name, first, DIGITS)
    if last >= len(name) or name[last] != '.':
        return name

    last += 1
    if last >= len(name) or name[last] not in DIGITS:
        return name

    last = _skip_chars(name, last, DIGITS)
    return name[:first] + name[last:]


def simplifyReflectionMethodName(name: str) -> str:
    """
    Drop the counters of generated reflection accessor classes.

    e.g. "sun.reflect.GeneratedMethodAccessor42.invoke"
    -> "sun.reflect.GeneratedMethodAccessor.invoke"
    """
    for prefix in REFLECTION_ACCESSOR_PREFIXES:
        name = simplifySuffixedName(name, prefix, DIGITS)
    return name


def simplifyFunctionName(name: str) -> str:
    """Apply the dynamic class, lambda and reflection rewrites in order."""
    return simplifyReflectionMethodName(
        simplifyLambdaName(simplifyDynamicClassName(name)))
