import pytest

from katanuki.game import Answer, Board, Direction, Operation, Problem, operate, standard_patterns
from katanuki.solver import AStarSolver, ExampleSolver, Node, Solver, reconstruct_path


def _problem(start, goal):
    height = len(start)
    width = len(start[0])
    return Problem(
        Board(width, height, [list(r) for r in start]),
        Board(width, height, [list(r) for r in goal]),
        standard_patterns(),
    )


def _replay(problem, operations):
    board = problem.start_board
    for op in operations:
        board = operate(board, op, problem.patterns[op.p])
    return board


def test_nodes_compare_by_board():
    a = Node(Board(1, 1, [[5]]))
    b = Node(Board(1, 1, [[5]]), cost=3.0)
    c = Node(Board(1, 1, [[4]]))
    assert a == b
    assert not a == c


def test_heuristic_mode_one_counts_differences():
    node = Node(Board(2, 2, [[0, 1], [2, 3]]))
    goal = Board(2, 2, [[1, 0], [2, 3]])
    assert node.heuristic_to(goal, 1) == 2.0
    assert node.heuristic_to(Board(2, 2, [[0, 1], [2, 3]]), 1) == 0.0


def test_heuristic_accepts_node_goal():
    node = Node(Board(2, 2, [[0, 1], [2, 3]]))
    goal = Node(Board(2, 2, [[1, 0], [2, 3]]))
    assert node.heuristic_to(goal, 1) == node.heuristic_to(goal.board, 1)


def test_heuristic_mode_two_is_smallest_on_goal():
    cells = [[0, 1], [2, 3]]
    node = Node(Board(2, 2, cells))
    same = node.heuristic_to(Board(2, 2, [list(r) for r in cells]), 2)
    other = node.heuristic_to(Board(2, 2, [[3, 2], [1, 0]]), 2)
    assert same == 12.0
    assert other > same


def test_unknown_mode_is_rejected():
    node = Node(Board(1, 1, [[0]]))
    with pytest.raises(ValueError):
        node.heuristic_to(Board(1, 1, [[0]]), 3)
    with pytest.raises(ValueError):
        AStarSolver(mode=0)


def test_describe_lists_fields():
    node = Node(Board(2, 1, [[0, 12]]))
    text = node.describe()
    lines = text.splitlines()
    assert lines[0] == "board: "
    assert "cost: 0" in lines
    assert "parent: none" in lines
    assert lines[1].split() == ["0", "12"]


def test_reconstruct_path_follows_parents():
    root = Node(Board(1, 1, [[0]]))
    first = Operation(0, 0, 0, Direction.UP)
    second = Operation(1, 1, 1, Direction.LEFT)
    middle = Node(Board(1, 1, [[0]]), first, 1.0, 0.0, root)
    leaf = Node(Board(1, 1, [[0]]), second, 2.0, 0.0, middle)
    assert reconstruct_path(leaf) == [first, second]
    assert reconstruct_path(root) == []


def test_trivial_solvers_return_empty_answers():
    problem = _problem([[0]], [[0]])
    assert Solver().solve(problem) == Answer()
    assert ExampleSolver().solve(problem) == Answer(False, [])


def test_astar_finds_single_move():
    problem = _problem([[0, 1], [2, 3]], [[1, 0], [2, 3]])
    answer = AStarSolver().solve(problem)
    assert answer.solved
    assert len(answer.operations) == 1
    assert _replay(problem, answer.operations) == problem.goal_board


def test_astar_with_start_equal_to_goal():
    problem = _problem([[0, 1], [2, 3]], [[0, 1], [2, 3]])
    answer = AStarSolver().solve(problem)
    assert answer.solved
    assert answer.operations == []


def test_astar_respects_expansion_limit():
    problem = _problem([[0, 1], [2, 3]], [[0, 0], [0, 0]])
    answer = AStarSolver(max_expansions=1).solve(problem)
    assert not answer.solved
    assert len(answer.operations) == 1