def _zigzag(length: int, rails: int) -> list[int]:
    """Rail index visited by each position of the zigzag."""
    pattern = []
    rail = 0
    direction = 1
    for _ in range(length):
        pattern.append(rail)
        rail += direction
        if rail == 0 or rail == rails - 1:
            direction = -direction
    return pattern


def rail_fence_encode(text: str, rails: int = 3) -> str:
    """
    Write ``text`` in a zigzag over ``rails`` rows and read the rows in order.

    Fewer than 2 rails leaves the text unchanged.
    """
    if rails < 2:
        return text

    fence: list[list[str]] = [[] for _ in range(rails)]
    for char, rail in zip(text, _zigzag(len(text), rails)):
        fence[rail].append(char)
    return "".join("".join(row) for row in fence)


def rail_fence_decode(text: str, rails: int = 3) -> str:
    if rails < 2:
        return text

    pattern = _zigzag(len(text), rails)
    # Positions belonging to each rail, in reading order.
    order = sorted(range(len(text)), key=lambda i: (pattern[i], i))

    result = [""] * len(text)
    for char, position in zip(text, order):
        result[position] = char
    return "".join(result)
