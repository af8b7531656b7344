from __future__ import annotations


def main() -> None:
    from eso_pricing import (
        OptionParameters,
        ParameterError,
        binomial_option_value,
        bs_price,
        eso_price,
        option_value_optimal,
    )

    # Permissive entry point: raw values in, [value, expected life] out.
    value, life = binomial_option_value(
        100.0, 90.0, 1.0, 0.25, 0.05, 0.3, 0.0, 0.1, 0.1, 2.0, 100
    )
    print("ESO value:", value, "expected life:", life)

    # Strict path: validate first, then price.
    p = OptionParameters.new(
        100.0, 100.0, 5.0, 2.0, 0.05, 0.3, 0.02, 0.1, 0.05, 2.5, 500
    )
    print("Validated:", eso_price(p), "European:", bs_price(p))

    print(
        "Optimal exercise:",
        option_value_optimal(100.0, 100.0, 5.0, 2.0, 0.05, 0.3, 0.02, 0.1, 0.05, 500.0),
    )

    try:
        OptionParameters.new(100.0, 100.0, 5.0, 2.0, 0.05, 0.3, 0.0, 0.1, 0.05, 2.5, 500)
    except ParameterError as e:
        print("Rejected:", e.parameter, "-", e)


if __name__ == "__main__":
    main()
