"""Render forms back to canonical source text."""

from .types import Form, List, Literal, OperatorAtom

# Appended to unterminated strings, and printed for unbalanced input.
UNBALANCED = "unbalanced"

_END = object()


def pr_str(form: Form) -> str:
    out: list[str] = []
    # one [items, first] frame per open list; the root frame holds only form
    stack = [[iter((form,)), True]]
    while stack:
        frame = stack[-1]
        node = next(frame[0], _END)
        if node is _END:
            stack.pop()
            if stack:
                out.append(")")
            continue
        if not frame[1]:
            out.append(" ")
        frame[1] = False
        if isinstance(node, OperatorAtom):
            out.append(str(node.op))
        elif isinstance(node, Literal):
            out.append(node.text)
        elif isinstance(node, List):
            out.append("(")
            stack.append([iter(node.items), True])
        else:
            raise TypeError(f"not a form: {node!r}")
    return "".join(out)
