from aoc2023.cli import app

app(prog_name="aoc2023")
