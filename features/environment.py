from dotenv import load_dotenv

from src.hooks.global_setup import global_setup
from src.hooks.global_teardown import global_teardown
from src.utils.config import TestEnvConfig

load_dotenv()


def before_all(context):
    # Directories and logging are prepared once for the whole run
    base_dir = context.config.userdata.get('base_dir')
    context.test_env = TestEnvConfig.from_env(base_dir)
    context.setup_info = global_setup(context.test_env)


def after_all(context):
    if hasattr(context, 'test_env'):
        context.teardown_summary = global_teardown(context.test_env)
