"""Split a cubic into pieces, graduate an offset over them and print the offset outline."""

from bezcore.curve import BzCurve
from bezcore.graduate import graduate

STEPS = 8


def main():
    """Main"""
    curve = BzCurve([(0.0, 0.0), (20.0, 80.0), (90.0, 60.0), (100.0, 0.0)])
    first, rest = curve.split(0.3)
    second, third = rest.split(0.5)
    pieces = [first, second, third]

    ranges = graduate(pieces, 10.0, 0.1, 1.0)
    for index, (piece, (start, end)) in enumerate(zip(pieces, ranges)):
        print(f"piece {index}: length={piece.length():.3f} graduation=[{start:.3f}, {end:.3f}]")
        for x, y in piece.offset_points(STEPS):
            print(f"    ({x:8.3f}, {y:8.3f})")


if __name__ == "__main__":
    main()
