import pytest

from cpusim.sync import (
    MAX_ACTIONS,
    MAX_RESOURCES,
    RELEASE,
    REQUEST,
    Action,
    ActionType,
    Resource,
    SyncAction,
    SyncResource,
    action_type_from_string,
    find_resource,
    load_actions,
    load_resources,
    simulate_synchronization,
)


def test_action_type_from_string_known_values():
    assert action_type_from_string("READ") is ActionType.READ
    assert action_type_from_string("WRITE") is ActionType.WRITE


@pytest.mark.parametrize("text", ["", "write", "EXEC", "READ "])
def test_action_type_from_string_defaults_to_read(text):
    assert action_type_from_string(text) is ActionType.READ


def test_load_resources_reads_lines(tmp_path):
    path = tmp_path / "recursos.txt"
    path.write_text("R1, 1\nR2, 3\n", encoding="utf-8")
    assert load_resources(path) == [Resource("R1", 1), Resource("R2", 3)]


def test_load_resources_skips_malformed_lines(tmp_path):
    path = tmp_path / "recursos.txt"
    path.write_text("R1, 1\nnonsense\nR2, x\nR3, 2\n", encoding="utf-8")
    assert [r.name for r in load_resources(path)] == ["R1", "R3"]


def test_load_resources_respects_limit(tmp_path):
    path = tmp_path / "recursos.txt"
    path.write_text("".join(f"R{i}, 1\n" for i in range(10)), encoding="utf-8")
    loaded = load_resources(path, 4)
    assert [r.name for r in loaded] == ["R0", "R1", "R2", "R3"]


def test_load_resources_default_limit(tmp_path):
    path = tmp_path / "recursos.txt"
    path.write_text("".join(f"R{i}, 1\n" for i in range(MAX_RESOURCES + 5)), encoding="utf-8")
    assert len(load_resources(path)) == MAX_RESOURCES


def test_load_resources_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_resources(tmp_path / "absent.txt")


def test_load_actions_reads_lines(tmp_path):
    path = tmp_path / "acciones.txt"
    path.write_text("P1, READ, R1, 0\nP2, WRITE, R2, 3\n", encoding="utf-8")
    assert load_actions(path) == [
        Action("P1", ActionType.READ, "R1", 0),
        Action("P2", ActionType.WRITE, "R2", 3),
    ]


def test_load_actions_unknown_type_is_read_and_bad_lines_skipped(tmp_path):
    path = tmp_path / "acciones.txt"
    path.write_text("P1, EXEC, R1, 2\nbroken line\nP3, WRITE, R1\n", encoding="utf-8")
    actions = load_actions(path)
    assert len(actions) == 1
    assert actions[0].action is ActionType.READ
    assert actions[0].cycle == 2


def test_load_actions_default_limit(tmp_path):
    path = tmp_path / "acciones.txt"
    path.write_text("P1, READ, R1, 0\n" * (MAX_ACTIONS + 3), encoding="utf-8")
    assert len(load_actions(path)) == MAX_ACTIONS


def test_find_resource():
    resources = [Resource("A", 1), Resource("B", 2), Resource("B", 5)]
    assert find_resource(resources, "B") is resources[1]
    assert find_resource(resources, "C") is None


def test_simulation_blocks_second_request_until_release():
    resources = [SyncResource("R1")]
    actions = [
        SyncAction(0, 0, REQUEST, "R1"),
        SyncAction(1, 1, REQUEST, "R1"),
        SyncAction(2, 0, RELEASE, "R1"),
        SyncAction(3, 1, REQUEST, "R1"),
    ]
    result = simulate_synchronization(resources, actions)
    assert [a.valid for a in result] == [True, False, True, True]
    assert resources[0].busy is True


def test_simulation_resets_resources_first():
    resources = [SyncResource("R1", busy=True)]
    actions = [SyncAction(0, 0, REQUEST, "R1")]
    simulate_synchronization(resources, actions)
    assert actions[0].valid is True


def test_simulation_leaves_unknown_resource_and_kind_untouched():
    resources = [SyncResource("R1")]
    actions = [
        SyncAction(0, 0, REQUEST, "missing"),
        SyncAction(1, 0, 7, "R1", valid=False),
    ]
    simulate_synchronization(resources, actions)
    assert actions[0].valid is None
    assert actions[1].valid is False
    assert resources[0].busy is False


def test_simulation_independent_resources():
    resources = [SyncResource("R1"), SyncResource("R2")]
    actions = [SyncAction(0, 0, REQUEST, "R1"), SyncAction(0, 1, REQUEST, "R2")]
    simulate_synchronization(resources, actions)
    assert all(a.valid for a in actions)
    assert all(r.busy for r in resources)