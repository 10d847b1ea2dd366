import json
import os

from behave import given, then

from setup_test_env import get_output_dirs, setup_test_environment


@given('the global setup has run')
def step_impl(context):
    assert context.setup_info["setup"] == "completed"


@then('the screenshots and reports directories exist')
def step_impl(context):
    for directory in get_output_dirs(context.test_env.base_dir):
        assert os.path.isdir(directory), f"missing {directory}"


@then('the setup marker lists every required directory')
def step_impl(context):
    marker = os.path.join(context.test_env.results_dir, 'global-setup-complete.json')
    with open(marker, 'r') as f:
        info = json.load(f)
    expected = [context.test_env.relative(d) for d in context.test_env.required_dirs()]
    assert info["directories"] == expected


@then('preparing the directories again creates nothing')
def step_impl(context):
    lines = []
    assert setup_test_environment(context.test_env.base_dir, echo=lines.append) == []
    assert lines == []
