"""Minimal example mapping a small table onto visual channels."""

from d3_svg_attrs import color, position, scale_category, scale_linear, shape, size


def main():
    data = [
        {"kind": "A", "weight": 2.0, "score": 10},
        {"kind": "B", "weight": 7.5, "score": 45},
        {"kind": "C", "weight": 4.0, "score": 80},
    ]

    kinds = scale_category("kind", [d["kind"] for d in data])
    weight = scale_linear("weight", 0, 10)
    score = scale_linear("score", 0, 100)

    fill = color(scales=[kinds], values="#1f77b4-#ff7f0e")
    radius = size(scales=[weight], values=[4, 12, 24])
    marker = shape(scales=[kinds], values=["circle", "square"])
    xy = position(scales=[kinds, score])

    for d in data:
        x, y = xy.mapping(d["kind"], d["score"])
        print(
            d["kind"],
            fill.mapping(d["kind"])[0],
            radius.mapping(d["weight"])[0],
            marker.mapping(d["kind"])[0],
            (x * 320, y * 160),
        )

    # one column of categories against many y values
    print(xy.mapping("B", [d["score"] for d in data]))


if __name__ == "__main__":
    main()
