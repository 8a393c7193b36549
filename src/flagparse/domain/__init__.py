"""Domain layer: flag and parse types, plus the protocols other layers implement."""
