"""Bracket matching and postfix evaluation on top of a linked stack."""

from __future__ import annotations

from dstructs.stacks import LinkedStack, StackEmptyError

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())
_OPERATORS = frozenset("+-*/")


def brackets_balanced(expression: str) -> bool:
    """Return True when every (), [] and {} in expression is properly paired."""
    stack: LinkedStack[str] = LinkedStack()
    for symbol in expression:
        if symbol in _OPENERS:
            stack.push(symbol)
        elif symbol in _PAIRS:
            if stack.is_empty() or stack.pop() != _PAIRS[symbol]:
                return False
    return stack.is_empty()


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and + - * /.

    Division truncates toward zero. Every other character is an operand
    whose value is its code minus the code of '0'. Raises ValueError when
    an operator lacks operands or nothing is left to return.
    """
    stack: LinkedStack[int] = LinkedStack()
    try:
        for symbol in expression:
            if symbol not in _OPERATORS:
                stack.push(ord(symbol) - ord("0"))
                continue
            right = stack.pop()
            left = stack.pop()
            if symbol == "+":
                stack.push(left + right)
            elif symbol == "-":
                stack.push(left - right)
            elif symbol == "*":
                stack.push(left * right)
            else:
                if right == 0:
                    raise ZeroDivisionError("division by zero in postfix expression")
                stack.push(_truncating_divide(left, right))
        return stack.pop()
    except StackEmptyError:
        raise ValueError(f"malformed postfix expression: {expression!r}") from None