"""Find deprecated singular Swagger property names in nested documents."""

# Singular spellings that should be plural (or are misplaced) in a Swagger document
WRONG_PROPERTIES = (
    "consume",
    "produce",
    "path",
    "tag",
    "definition",
    "securityDefinition",
    "scheme",
    "response",
    "parameter",
    "deprecated",
)


def seek_wrong(source, wrong=WRONG_PROPERTIES, allow_flags: bool = False) -> list[str]:
    """Walk one document depth-first and return offending keys in document order.

    Keys directly under a ``properties`` map are user-defined property names
    and are never reported. With ``allow_flags``, keys holding a boolean
    (the operation-level ``deprecated: true``) are not reported either.
    """
    problems = []
    stack = [(source, ())]
    while stack:
        node, path = stack.pop()
        if path:
            key = path[-1]
            in_properties = len(path) > 1 and path[-2] == "properties"
            is_flag = allow_flags and isinstance(node, bool)
            if key in wrong and not in_properties and not is_flag:
                problems.append(key)

        if isinstance(node, dict):
            children = list(node.items())
        elif isinstance(node, list):
            children = list(enumerate(node))
        else:
            continue
        for key, child in reversed(children):
            stack.append((child, path + (key,)))
    return problems


def find_deprecated(sources: list, allow_flags: bool = False) -> list[str]:
    """Return the deprecated keys found across all sources, duplicates included."""
    problems = []
    for source in sources:
        problems.extend(seek_wrong(source, allow_flags=allow_flags))
    return problems
