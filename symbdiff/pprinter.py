from symbdiff.expr import AtomicExpr, BinaryExpr


class PPrinter:
    def __init__(self):
        self.global_indent = ""
        self.global_indent_level = 0
        self.lines = []

    def indent(self):
        self.global_indent_level += 4
        self.global_indent = self.global_indent_level * " "
        return ""

    def outdent(self):
        self.global_indent_level -= 4
        self.global_indent = self.global_indent_level * " "
        return ""

    def nl(self):
        return "\n"

    def emit(self, text):
        self.lines.append(f"{self.global_indent}{text}")

    def output(self):
        return self.nl().join(self.lines)


def _dump(pp, expr):
    if isinstance(expr, AtomicExpr):
        pp.emit(f"Atomic {expr.to_ast_string()}")
    elif isinstance(expr, BinaryExpr):
        pp.emit(f"Binary '{expr.op}'")
        pp.indent()
        _dump(pp, expr.lhs)
        _dump(pp, expr.rhs)
        pp.outdent()
    else:
        pp.emit(f"Botched: {expr.message}")


def dump_tree(expr):
    """Multi-line indented view of an AST, one node per line."""
    pp = PPrinter()
    _dump(pp, expr)
    return pp.output()
