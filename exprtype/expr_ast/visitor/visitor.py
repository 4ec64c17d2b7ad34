from typing import List, Type


class AstVisitor:
    """
    Visitor base class which dispatches on the class name of the visited node.

    The tree is walked bottom-up with an explicit stack, so its depth is not limited by the interpreter's recursion
    limit. Children are visited left to right. Each child subtree is finished before its right sibling is entered,
    and the node itself comes last. The visit function of a node receives the node followed by the results of its
    children, e.g. ``visitPlus(ast, lhs_result, rhs_result)``.

    visit functions are looked up along the class hierarchy, so ``visitBinaryExpr`` handles every binary node without
    a more specific rule. A node without any matching visit function raises NotImplementedError when it is reached.
    An exception raised by a visit function aborts the walk, nodes to its right are never visited.
    """

    def visit(self, ast):
        results = []
        # (node, visit function, number of children); the function is None until the children are scheduled
        stack = [(ast, None, 0)]
        while stack:
            node, f, n = stack.pop()
            if f is None:
                f = self.get_visit_function(node.__class__)
                if f is None:
                    raise NotImplementedError(f'{type(self).__name__} has no rule for {type(node).__name__}')
                children = node.children()
                stack.append((node, f, len(children)))
                stack.extend((c, None, 0) for c in reversed(children))
            else:
                args = results[len(results) - n:]
                del results[len(results) - n:]
                results.append(f(node, *args))
        return results[0]

    def get_visit_function(self, c):
        visitor_function = 'visit' + c.__name__
        if hasattr(self, visitor_function):
            return getattr(self, visitor_function)
        else:
            for base in c.__bases__:
                f = self.get_visit_function(base)
                if f:
                    return f
        return None


def concrete_node_types(root: Type) -> List[Type]:
    """Return all leaf classes of the class hierarchy below (and including) root."""
    subclasses = root.__subclasses__()
    if not subclasses:
        return [root]
    leaves = []
    for sub in subclasses:
        leaves += [c for c in concrete_node_types(sub) if c not in leaves]
    return leaves


def unhandled_node_types(visitor_cls: Type[AstVisitor], root: Type) -> List[Type]:
    """
    Return the concrete node types below root for which visitor_cls has no dedicated visit function.

    Visit functions inherited from a node's base classes do not count, every concrete node type needs its own rule.
    """
    return [c for c in concrete_node_types(root) if not hasattr(visitor_cls, 'visit' + c.__name__)]
