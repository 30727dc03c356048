from aoc2025.day4 import parse_input, part1, part2, solve

EXAMPLE = (
    "..@@.@@@@.\n"
    "@@@.@.@.@@\n"
    "@@@@@.@.@@\n"
    "@.@@@@..@.\n"
    "@@.@@@@.@@\n"
    ".@@@@@@@.@\n"
    ".@.@.@.@@@\n"
    "@.@@@.@@@@\n"
    ".@@@@@@@@.\n"
    "@.@.@@@.@.\n"
)


def test_parse_input_shape():
    grid = parse_input(EXAMPLE)
    lines = EXAMPLE.split()
    assert grid.width == len(lines[0])
    assert grid.height == len(lines)
    assert "".join(grid) == "".join(lines)


def test_example():
    grid = parse_input(EXAMPLE)
    assert part1(grid) == 13
    assert part2(grid) == 43


def test_part2_leaves_input_untouched():
    grid = parse_input(EXAMPLE)
    before = grid.copy()
    part2(grid)
    assert grid == before


def test_part2_includes_first_round():
    grid = parse_input(EXAMPLE)
    assert part2(grid) >= part1(grid)
    assert part2(grid) <= EXAMPLE.count("@")


def test_isolated_rolls_are_all_reachable():
    text = ".@.\n...\n..@\n"
    grid = parse_input(text)
    assert part1(grid) == text.count("@")
    assert part2(grid) == text.count("@")


def test_full_block_is_cleared_eventually():
    text = "@@@\n@@@\n@@@\n"
    grid = parse_input(text)
    assert part1(grid) < text.count("@")
    assert part2(grid) == text.count("@")


def test_empty_floor_has_nothing():
    grid = parse_input("...\n...\n")
    assert part1(grid) == part2(grid) == 0


def test_solve_matches_parts():
    solution = solve(EXAMPLE)
    grid = parse_input(EXAMPLE)
    assert solution.part1 == part1(grid)
    assert solution.part2 == part2(grid)