from __future__ import annotations

from rich.console import Console
from rich.text import Text

TITLE = "Advent of Code 2023"

TREE = r"""
          .     .  .      +     .      .          .
     .       .      .     #       .           .
        .      .         ###            .      .      .
      .      .   "#:. .:##"##:. .:#"  .      .
          .      . "####"###"####"  .
       .     "#:.    .:#"###"#:.    .:#"  .        .       .
  .             "#########"#########"        .        .
        .    "#:.  "####"###"####"  .:#"   .       .
     .     .  "#######""##"##""#######"                  .
                ."##"#####"#####"##"           .      .
    .   "#:. ...  .:##"###"###"##:.  ... .:#"     .
      .     "#######"##"#####"##"#######"      .     .
    .    .     "#####""#######""#####"    .      .
            .     "      000      "    .     .
       .         .   .   000     .        .       .
.. .. ..................O000O........................ ...... ...
"""


def print_header(console: Console) -> None:
    """Print the title and the tree shown before running the solutions."""
    console.print(Text(f"{TITLE:^55}", style="bright_red"))
    console.print(Text(TREE, style="green"))
    console.print("Running solution set...")


__all__ = ("print_header",)
