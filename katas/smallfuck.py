"""Interpreter for the Smallfuck esoteric language on a bounded bit tape."""


def _matching_close(code: str, position: int) -> int:
    depth = 0
    for index, char in enumerate(code[position + 1:], start=position + 1):
        if char == "]":
            if depth == 0:
                return index
            depth -= 1
        elif char == "[":
            depth += 1
    raise ValueError(f"unmatched '[' at position {position}")


def _matching_open(code: str, position: int) -> int:
    depth = 0
    for index in range(position - 1, -1, -1):
        char = code[index]
        if char == "[":
            if depth == 0:
                return index
            depth -= 1
        elif char == "]":
            depth += 1
    raise ValueError(f"unmatched ']' at position {position}")


def interpreter(code: str, tape: str) -> str:
    """Run ``code`` on ``tape`` and return the final tape."""
    cells = list(tape)
    pc = 0
    pointer = 0

    while pc < len(code) and pointer < len(cells):
        op = code[pc]
        if op == "*":
            cells[pointer] = "1" if cells[pointer] == "0" else "0"
            pc += 1
        elif op == ">":
            pc += 1
            pointer += 1
        elif op == "<":
            pc += 1
            if pointer == 0:
                break
            pointer -= 1
        elif op == "[":
            if cells[pointer] == "1":
                pc += 1
            else:
                pc = _matching_close(code, pc)
        elif op == "]":
            if cells[pointer] != "1":
                pc += 1
            elif pc == 0:
                break
            else:
                pc = _matching_open(code, pc)
        else:
            pc += 1

    return "".join(cells)