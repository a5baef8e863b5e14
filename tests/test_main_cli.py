import pytest

from main import build_config, build_parser, main, EXIT_USAGE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ('PATHGAME_BACKGROUND', 'PATHGAME_LAYOUT', 'PATHGAME_TILE_SIZE', 'PATHGAME_FPS',
                'PATHGAME_MOVE_DURATION', 'PATHGAME_EASING', 'PATHGAME_SHOW_PATH'):
        monkeypatch.delenv(var, raising=False)


def test_print_distances_reports_start_distance(capsys):
    assert main(['--print-distances']) == 0
    out = capsys.readouterr().out
    assert "29 steps" in out
    assert len(out.strip().splitlines()) >= 15


def test_print_distances_for_unreachable_goal(tmp_path, capsys):
    layout = tmp_path / 'walled.txt'
    layout.write_text("S#G\n", encoding='utf-8')
    assert main(['--layout', str(layout), '--print-distances']) == 0
    assert "unreachable" in capsys.readouterr().out


def test_missing_layout_is_usage_error(tmp_path):
    assert main(['--layout', str(tmp_path / 'nope.txt'), '--print-distances']) == EXIT_USAGE


def test_malformed_layout_is_usage_error(tmp_path):
    layout = tmp_path / 'bad.txt'
    layout.write_text("S..\n..\n", encoding='utf-8')
    assert main(['--layout', str(layout), '--print-distances']) == EXIT_USAGE


def test_invalid_tile_size_is_usage_error():
    assert main(['--tile-size', '0', '--print-distances']) == EXIT_USAGE


def test_bad_env_value_is_usage_error(monkeypatch):
    monkeypatch.setenv('PATHGAME_FPS', 'fast')
    assert main(['--print-distances']) == EXIT_USAGE


def test_unknown_easing_rejected_by_parser():
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--easing', 'bounce'])


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv('PATHGAME_TILE_SIZE', '16')
    args = build_parser().parse_args(['--tile-size', '24', '--no-path', '--easing', 'ease_out_quad'])
    config = build_config(args)
    assert config.tile_size == 24
    assert config.show_path_overlay is False
    assert config.easing == 'ease_out_quad'


def test_environment_used_when_flag_absent(monkeypatch):
    monkeypatch.setenv('PATHGAME_MOVE_DURATION', '0.3')
    config = build_config(build_parser().parse_args([]))
    assert config.move_duration == pytest.approx(0.3)


def test_non_utf8_layout_is_usage_error(tmp_path):
    layout = tmp_path / 'binary.txt'
    layout.write_bytes(b"S\xff\xfeG\n")
    assert main(['--layout', str(layout), '--print-distances']) == EXIT_USAGE
