ABC = "abcdefghijklmnopqrstuvwxyz"
ABC_RUS = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"


def generate(abc: str, n: int) -> str:
    """Return a string of n characters cycling through abc."""
    return (abc * (n // len(abc) + 1))[:n]
