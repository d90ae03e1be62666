import sys

from run_tests import TestRunner, build_parser


def test_ui_command_with_tags_parallel_and_allure():
    runner = TestRunner(suite="ui", tags=["P0", "smoke"], parallel=4)

    cmd = runner.build_pytest_command()

    assert cmd[:4] == [sys.executable, "-m", "pytest", "testsuites/ui_testing/tests"]
    assert cmd[cmd.index("-m", 4) + 1] == "P0 or smoke"
    assert cmd[cmd.index("-n") + 1] == "4"
    assert cmd[cmd.index("--alluredir") + 1] == str(runner.allure_results)
    assert cmd[-1] == "-q"


def test_unit_command_without_allure_is_minimal():
    cmd = TestRunner(suite="unit", allure_report=False, verbose=True).build_pytest_command()

    assert cmd == [sys.executable, "-m", "pytest", "testsuites/unit", "-v"]


def test_browser_settings_are_passed_as_config_overrides():
    env = TestRunner(browser="firefox", headless=False).build_environment()

    assert env["UI_BROWSER"] == "firefox"
    assert env["UI_HEADLESS"] == "false"


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.suite == "all"
    assert args.browser == "chromium"
    assert args.parallel == 1
    assert not args.no_headless
    assert not args.no_allure
