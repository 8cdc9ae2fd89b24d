from sokoban_engine.components import Player, Position
from sokoban_engine.systems.push import push_system
from tests.test_utils import assert_entity_positions, make_agent_box_wall_world


def test_push_box_success() -> None:
    world, agent_id, box_ids = make_agent_box_wall_world(
        agent_pos=(0, 0), box_positions=[(1, 0)], width=3, height=1
    )
    assert agent_id is not None
    new_world = push_system(world, agent_id, Position(1, 0))
    assert new_world is not None
    assert_entity_positions(new_world, {agent_id: (1, 0), box_ids[0]: (2, 0)})


def test_nothing_to_push_returns_same_world() -> None:
    world, agent_id, _ = make_agent_box_wall_world(agent_pos=(0, 0), width=3, height=1)
    assert agent_id is not None
    assert push_system(world, agent_id, Position(1, 0)) is world


def test_push_box_blocked_by_wall() -> None:
    world, agent_id, _ = make_agent_box_wall_world(
        agent_pos=(0, 0),
        box_positions=[(1, 0)],
        wall_positions=[(2, 0)],
        width=3,
        height=1,
    )
    assert agent_id is not None
    assert push_system(world, agent_id, Position(1, 0)) is None


def test_push_box_blocked_by_another_box() -> None:
    world, agent_id, _ = make_agent_box_wall_world(
        agent_pos=(0, 0), box_positions=[(1, 0), (2, 0)], width=4, height=1
    )
    assert agent_id is not None
    assert push_system(world, agent_id, Position(1, 0)) is None


def test_push_out_of_bounds() -> None:
    world, agent_id, _ = make_agent_box_wall_world(
        agent_pos=(1, 0), box_positions=[(2, 0)], width=3, height=1
    )
    assert agent_id is not None
    assert push_system(world, agent_id, Position(2, 0)) is None


def test_push_toward_negative_edge() -> None:
    world, agent_id, _ = make_agent_box_wall_world(
        agent_pos=(1, 0), box_positions=[(0, 0)], width=3, height=1
    )
    assert agent_id is not None
    assert push_system(world, agent_id, Position(0, 0)) is None


def test_stacked_boxes_cannot_be_pushed() -> None:
    world, agent_id, _ = make_agent_box_wall_world(
        agent_pos=(0, 0), box_positions=[(1, 0), (1, 0)], width=4, height=1
    )
    assert agent_id is not None
    assert push_system(world, agent_id, Position(1, 0)) is None


def test_push_onto_goal() -> None:
    world, agent_id, box_ids = make_agent_box_wall_world(
        agent_pos=(0, 0),
        box_positions=[(1, 0)],
        goal_positions=[(2, 0)],
        width=3,
        height=1,
    )
    assert agent_id is not None
    new_world = push_system(world, agent_id, Position(1, 0))
    assert new_world is not None
    assert_entity_positions(new_world, {box_ids[0]: (2, 0)})
    assert new_world.board is world.board


def test_push_leaves_input_untouched() -> None:
    world, agent_id, box_ids = make_agent_box_wall_world(
        agent_pos=(0, 0), box_positions=[(1, 0)], width=3, height=1
    )
    assert agent_id is not None
    push_system(world, agent_id, Position(1, 0))
    assert world.entities[agent_id] == Player(Position(0, 0))
    assert_entity_positions(world, {box_ids[0]: (1, 0)})
