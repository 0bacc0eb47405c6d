import copy


def format_number(num):
    if isinstance(num, float) and num.is_integer():
        return f"{int(num)}"
    return f"{num}"


class Expr(object):
    is_botched = False

    def to_string(self, var):
        raise NotImplementedError

    def to_ast_string(self):
        raise NotImplementedError

    def derive_symbolic(self):
        raise NotImplementedError

    def negated(self):
        raise NotImplementedError

    def eval(self, x):
        raise NotImplementedError

    def __repr__(self):
        return self.to_ast_string()

    def __eq__(self, other):
        raise NotImplementedError


class AtomicExpr(Expr):
    """coefficient * var^power, where power 0 is a plain constant."""

    def __init__(self, constant, power=0):
        super().__init__()
        if power < 0:
            raise ValueError(f"power must be non-negative, got {power}")
        self.constant = constant
        self.power = power

    def to_string(self, var):
        if self.power == 0:
            return format_number(self.constant)

        if self.constant == 1:
            coefficient = ""
        else:
            coefficient = format_number(self.constant)

        if self.power == 1:
            return f"{coefficient}{var}"
        return f"{coefficient}{var}^{self.power}"

    def to_ast_string(self):
        return f"[{format_number(self.constant)}, {self.power}]"

    def derive_symbolic(self):
        return [AtomicExpr(self.constant * self.power, max(self.power - 1, 0))]

    def negated(self):
        return AtomicExpr(-self.constant, self.power)

    def eval(self, x):
        return self.constant * x ** self.power

    def __eq__(self, other):
        if not isinstance(other, AtomicExpr):
            return False
        return self.constant == other.constant and self.power == other.power


class BinaryExpr(Expr):
    OPS = ("+", "-", "*")

    def __init__(self, op, lhs, rhs):
        super().__init__()
        if op not in self.OPS:
            raise ValueError(f"unsupported operator '{op}'")
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

    def to_string(self, var):
        # Nested binaries are not parenthesized.
        return f"{self.lhs.to_string(var)} {self.op} {self.rhs.to_string(var)}"

    def to_ast_string(self):
        return f"({self.lhs.to_ast_string()} {self.op} {self.rhs.to_ast_string()})"

    def derive_symbolic(self):
        lhs_terms = self.lhs.derive_symbolic()
        rhs_terms = self.rhs.derive_symbolic()

        if self.op == "*":
            # Product rule, one term per derivative term of either side.
            terms = []
            for i, term in enumerate(lhs_terms):
                rhs = self.rhs if i == 0 else copy.deepcopy(self.rhs)
                terms.append(BinaryExpr("*", term, rhs))
            for i, term in enumerate(rhs_terms):
                lhs = self.lhs if i == 0 else copy.deepcopy(self.lhs)
                terms.append(BinaryExpr("*", term, lhs))
            return terms

        combined = BinaryExpr(self.op, lhs_terms[-1], rhs_terms[0])
        rest = rhs_terms[1:]
        if self.op == "-":
            rest = [term.negated() for term in rest]
        return lhs_terms[:-1] + [combined] + rest

    def negated(self):
        if self.op == "*":
            return BinaryExpr("*", self.lhs.negated(), self.rhs)
        flipped = "-" if self.op == "+" else "+"
        return BinaryExpr(flipped, self.lhs.negated(), self.rhs)

    def eval(self, x):
        lhs = self.lhs.eval(x)
        rhs = self.rhs.eval(x)
        if self.op == "+":
            return lhs + rhs
        if self.op == "-":
            return lhs - rhs
        return lhs * rhs

    def __eq__(self, other):
        if not isinstance(other, BinaryExpr):
            return False
        return (self.op == other.op) and (self.lhs == other.lhs) and (self.rhs == other.rhs)


class BotchedExpr(Expr):
    """Marks a line that could not be parsed. Carries only the message."""

    is_botched = True

    def __init__(self, message):
        super().__init__()
        self.message = message

    def to_string(self, var):
        raise ValueError(f"cannot print a botched expression: {self.message}")

    def to_ast_string(self):
        return f"<error: {self.message}>"

    def derive_symbolic(self):
        raise ValueError(f"cannot differentiate a botched expression: {self.message}")

    def negated(self):
        raise ValueError(f"cannot negate a botched expression: {self.message}")

    def eval(self, x):
        raise ValueError(f"cannot evaluate a botched expression: {self.message}")

    def __eq__(self, other):
        if not isinstance(other, BotchedExpr):
            return False
        return self.message == other.message
