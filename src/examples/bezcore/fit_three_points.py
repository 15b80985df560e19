"""Fit quadratic and cubic curves through three points and print their properties."""

from bezcore.fitting import generate_curve

POINTS = ((0.0, 0.0), (50.0, 100.0), (100.0, 0.0))
PARAMETERS = (0.25, 0.5, 0.75)


def main():
    """Main"""
    for order in (2, 3):
        for t in PARAMETERS:
            curve = generate_curve(order, *POINTS, t=t)
            point = curve.point(t)
            box = curve.bbox()
            print(f"order={order} t={t:.2f}: {curve}")
            print(f"    point(t)=({point.x:.3f}, {point.y:.3f}) length={curve.length():.3f} bbox={box.extent}")


if __name__ == "__main__":
    main()
