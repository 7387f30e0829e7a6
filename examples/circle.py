# examples/circle.py
"""
Declaring, raising and recognising falta errors.

Run: python examples/circle.py
"""

from dataclasses import dataclass

import falta


@dataclass
class Circle:
    radius: int


ErrInvalidCircle = falta.new("invalid circle: radius ({{ radius }}) <= 0", Circle)
ErrCannotOpen = falta.newf("open: cannot open file %s")


def check_circle(circle: Circle) -> None:
    if circle.radius <= 0:
        raise ErrInvalidCircle(circle)


def read_file(name: str) -> str:
    with ErrCannotOpen(name).capture():
        with open(name, encoding="utf-8") as f:
            return f.read()


def main():
    try:
        check_circle(Circle(radius=-1))
    except falta.Falta as err:
        print(err)  # invalid circle: radius (-1) <= 0
        print("invalid circle?", falta.is_error(err, ErrInvalidCircle))

    try:
        read_file("does-not-exist.txt")
    except falta.Falta as err:
        print(err)
        print("cannot open?", falta.is_error(err, ErrCannotOpen))
        print("file not found?", isinstance(err.unwrap(), FileNotFoundError))


if __name__ == "__main__":
    main()
