import pytest

from mazegen.domain.grid import Grid
from mazegen.domain.types import Direction
from mazegen.utils.grid_factory import create_grid


@pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2), (0, 0)])
def test_rejects_non_positive_dimensions(rows, columns):
    with pytest.raises(ValueError):
        Grid(rows, columns)


@pytest.mark.parametrize("rows, columns", [(2.5, 3), ("2", 3), (True, 2)])
def test_rejects_non_integer_dimensions(rows, columns):
    with pytest.raises(ValueError):
        Grid(rows, columns)


def test_create_grid_starts_with_all_walls():
    grid = create_grid(3, 4)
    assert grid.size == 12
    assert grid.link_count() == 0
    assert all(cell.is_empty() for row in grid for cell in row)


def test_cell_locations_are_row_major():
    grid = Grid(2, 3)
    assert grid.cell_locations() == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_cells_know_their_coordinates():
    grid = Grid(3, 2)
    assert grid.cell(2, 1).coord == (2, 1)
    assert grid.cell(3, 0) is None
    assert grid.cell(0, -1) is None


def test_link_is_symmetric():
    grid = Grid(3, 3)
    assert grid.link(1, 1, Direction.NORTH)
    assert grid.is_linked((1, 1), Direction.NORTH)
    assert grid.is_linked((2, 1), Direction.SOUTH)
    assert grid.link_count() == 1

    assert grid.link(1, 1, Direction.WEST)
    assert grid.links((1, 0)) == frozenset({Direction.EAST})
    assert grid.link_count() == 2


def test_linking_twice_does_not_add_a_link():
    grid = Grid(2, 2)
    grid.link(0, 0, Direction.EAST)
    grid.link(0, 1, Direction.WEST)
    assert grid.link_count() == 1


def test_boundary_links_are_no_ops():
    grid = Grid(3, 4)
    edge_requests = []
    for column in range(grid.columns):
        edge_requests.append((0, column, Direction.SOUTH))
        edge_requests.append((grid.rows - 1, column, Direction.NORTH))
    for row in range(grid.rows):
        edge_requests.append((row, 0, Direction.WEST))
        edge_requests.append((row, grid.columns - 1, Direction.EAST))

    for row, column, direction in edge_requests:
        assert grid.link(row, column, direction) is False

    assert grid.link_count() == 0
    assert all(cell.is_empty() for row in grid for cell in row)


def test_link_from_outside_the_grid_is_a_no_op():
    grid = Grid(2, 2)
    assert grid.link(5, 5, Direction.SOUTH) is False
    assert grid.link(-1, 0, Direction.NORTH) is False
    assert grid.link_count() == 0


def test_neighbors_order_is_south_north_west_east():
    grid = Grid(3, 3)
    assert grid.neighbors((1, 1)) == [
        ((0, 1), Direction.SOUTH),
        ((2, 1), Direction.NORTH),
        ((1, 0), Direction.WEST),
        ((1, 2), Direction.EAST),
    ]


def test_corner_neighbors_stay_in_bounds():
    grid = Grid(3, 3)
    assert grid.neighbors((0, 0)) == [((1, 0), Direction.NORTH), ((0, 1), Direction.EAST)]
    assert grid.neighbors((2, 2)) == [((1, 2), Direction.SOUTH), ((2, 1), Direction.WEST)]


def test_single_cell_has_no_neighbors():
    assert Grid(1, 1).neighbors((0, 0)) == []


def test_links_outside_grid_are_empty():
    grid = Grid(2, 2)
    assert grid.links((4, 4)) == frozenset()
    assert not grid.is_linked((4, 4), Direction.NORTH)


def test_direction_opposites_and_offsets():
    for direction in Direction:
        assert direction.opposite.opposite is direction
        d_row, d_column = direction.offset
        o_row, o_column = direction.opposite.offset
        assert (d_row + o_row, d_column + o_column) == (0, 0)
    assert Direction.NORTH.offset == (1, 0)
    assert Direction.EAST.offset == (0, 1)


def test_cell_unlink_closes_one_side_only():
    grid = Grid(1, 2)
    grid.link(0, 0, Direction.EAST)
    cell = grid.cell(0, 0)

    cell.unlink(Direction.EAST)
    cell.unlink(Direction.NORTH)
    assert cell.is_empty()
    assert grid.is_linked((0, 1), Direction.WEST)
