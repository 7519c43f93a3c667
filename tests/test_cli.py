import pytest

from bucketstore.cli import main


def test_describe(capsys):
    assert main(["describe", "--capacity", "1", "a=1", "b=2"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "KeyedBucketStore{size: 2, capacity: 1, loadFactor: 2.00}\n"
        "Bucket 0: [a: 1] -> [b: 2]\n"
    )


def test_describe_later_duplicate_updates(capsys):
    main(["describe", "--capacity", "1", "a=1", "a=9"])
    out = capsys.readouterr().out
    assert "size: 1" in out
    assert "[a: 9]" in out


def test_describe_value_may_contain_equals(capsys):
    main(["describe", "--capacity", "1", "expr=x=y"])
    assert "[expr: x=y]" in capsys.readouterr().out


def test_describe_default_capacity(capsys):
    main(["describe", "--capacity", "0"])
    assert capsys.readouterr().out == (
        "KeyedBucketStore{size: 0, capacity: 16, loadFactor: 0.00}\n"
    )


def test_describe_rejects_bare_key(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["describe", "novalue"])
    assert excinfo.value.code == 2
    assert "KEY=VALUE" in capsys.readouterr().err


def test_distribution(capsys):
    assert main(["distribution", "--capacity", "1", "a", "b", "c=3"]) == 0
    out = capsys.readouterr().out
    assert out == "3: 1\nload factor: 3.00\n"


def test_distribution_counts_every_bucket(capsys):
    keys = [f"key{i}" for i in range(10)]
    main(["distribution", "--capacity", "4", *keys])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "load factor: 2.50"
    histogram = dict(line.split(": ") for line in lines[:-1])
    assert sum(int(count) for count in histogram.values()) == 4
    assert sum(int(length) * int(count) for length, count in histogram.items()) == 10
    assert [int(length) for length in histogram] == sorted(int(length) for length in histogram)


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "describe" in capsys.readouterr().out


def test_debug_logging_goes_to_stderr(capsys):
    main(["--log-level", "debug", "describe", "--capacity", "2", "a=1"])
    captured = capsys.readouterr()
    assert "[cli.load] Loaded 1 keys into 2 buckets" in captured.err
    assert "[cli.load]" not in captured.out


def test_unknown_log_level_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "loud", "describe", "a=1"])
    assert excinfo.value.code == 2
    err = capsys.readouterr().err
    assert "invalid choice" in err
    assert "LOUD" in err


def test_log_level_is_case_insensitive(capsys):
    assert main(["--log-level", "Info", "describe", "--capacity", "2", "a=1"]) == 0
    assert "[cli.load] Loaded 1 keys into 2 buckets" in capsys.readouterr().err
