def fold(node, children, build):
    """Bottom-up fold over a tree without recursion.

    ``children(n)`` returns the child nodes of ``n`` in order and
    ``build(n, results)`` gets the already-built results for those children.
    A left-deep chain like ``1+1+...+1`` has one level per operator, so the
    walk keeps its own stack instead of using Python's.
    """
    stack = [(node, False)]
    results = []
    while stack:
        n, expanded = stack.pop()
        kids = children(n)
        if expanded:
            start = len(results) - len(kids)
            args = results[start:]
            del results[start:]
            results.append(build(n, args))
        else:
            stack.append((n, True))
            stack.extend((k, False) for k in reversed(kids))
    return results[0]
