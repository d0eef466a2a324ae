import io

from dinorun.controller import Controller, Outcome, RawTerminal
from dinorun.objects import Block, BlockType, create_cactus, create_coin
from dinorun.units import Vec2
from dinorun.view import View


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def randint(self, a, b):
        assert (a, b) == (1, 5)
        return self.value


def make_controller(roll=3, keys=None):
    view = View(stream=io.StringIO(), size_source=lambda: (24, 80))
    key_iter = iter(keys) if keys is not None else None
    read_key = (lambda: next(key_iter, -1)) if key_iter is not None else (lambda: -1)
    return Controller(view, rng=FixedRoll(roll), read_key=read_key, sleep=lambda s: None)


def test_starts_with_player_only():
    c = make_controller()
    assert c.objects == [c.player]
    assert c.won is False


def test_handle_input_w_starts_jump():
    c = make_controller()
    c.handle_input(ord("w"))
    assert c.player.jump_state == 1


def test_handle_input_upper_w_starts_jump():
    c = make_controller()
    c.handle_input(ord("W"))
    assert c.player.jump_state == 1


def test_handle_input_other_keys_ignored():
    c = make_controller()
    c.handle_input(-1)
    c.handle_input(ord("a"))
    assert c.player.jump_state == 0


def test_check_score_threshold():
    c = make_controller()
    c.player.score = 9
    c.check_score()
    assert c.won is False
    c.player.score = 10
    c.check_score()
    assert c.won is True


def test_step_spawns_cactus_then_leaves_space():
    c = make_controller(roll=1)
    c.step(-1)
    assert len(c.objects) == 2
    assert c.objects[1].block_type is BlockType.CACTUS
    c.step(-1)
    assert len(c.objects) == 2
    c.step(-1)
    assert len(c.objects) == 3


def test_step_spawns_coin():
    c = make_controller(roll=2)
    c.step(-1)
    assert c.objects[-1].block_type is BlockType.COIN


def test_step_no_spawn_on_other_rolls():
    c = make_controller(roll=4)
    c.step(-1)
    assert c.objects == [c.player]


def test_step_moves_blocks_left():
    c = make_controller()
    block = create_coin()
    c.objects.append(block)
    c.step(-1)
    assert block.position.x == 38


def test_step_collision_with_cactus_kills_player():
    c = make_controller()
    c.objects.append(Block(BlockType.CACTUS, Vec2(1, 14)))
    c.step(-1)
    assert c.player.alive is False
    assert c.objects == []


def test_step_collision_with_coin_scores():
    c = make_controller()
    c.objects.append(Block(BlockType.COIN, Vec2(1, 14)))
    c.step(-1)
    assert c.player.score == 1
    assert c.objects == [c.player]


def test_step_jump_moves_player_up():
    c = make_controller()
    c.step(ord("w"))
    assert c.player.position.y == 13


def test_run_quits_on_escape(capsys):
    c = make_controller(keys=[27])
    assert c.run() is Outcome.QUIT


def test_run_loses_against_cacti(capsys):
    c = make_controller(roll=1)
    assert c.run() is Outcome.LOSE
    assert "You lose." in capsys.readouterr().out


def test_run_wins_by_collecting_coins(capsys):
    c = make_controller(roll=2)
    assert c.run() is Outcome.WIN
    assert c.player.score >= 10
    assert "You win!!!" in capsys.readouterr().out


def test_raw_terminal_hides_and_restores_cursor():
    stream = io.StringIO()
    with RawTerminal(fd=-1, stream=stream):
        inside = stream.getvalue()
    assert inside == "\x1b[?25l"
    assert stream.getvalue().endswith("\x1b[?25h")


def test_cactus_factory_position_used_in_game():
    cactus = create_cactus()
    c = make_controller()
    c.objects.append(cactus)
    c.step(-1)
    assert cactus.position == Vec2(38, 14)