from endless_runner.core.scene import Scene


def test_updaters_run_in_order_with_dt() -> None:
    calls = []
    scene = Scene()
    scene.updaters.extend([lambda dt: calls.append(("a", dt)), lambda dt: calls.append(("b", dt))])

    scene.update(0.25)

    assert calls == [("a", 0.25), ("b", 0.25)]


def test_log_timing_is_quiet_unless_asked(capsys) -> None:
    scene = Scene()
    scene.log_timing("Loading", 1.0, 1.5)
    assert capsys.readouterr().out == ""
    scene.log_timing("Loading", 1.0, 1.5, log=True)
    assert "Loading took 0.500000 seconds" in capsys.readouterr().out
