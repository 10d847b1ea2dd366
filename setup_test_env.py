import os
from typing import Callable, List, Optional

RESULTS_DIR = 'test-results'
OUTPUT_DIRS = ('screenshots', 'reports')


def get_output_dirs(base_dir: Optional[str] = None) -> List[str]:
    """Absolute output directories for a test run, screenshots first."""
    base_dir = os.path.abspath(base_dir or os.getcwd())
    return [os.path.join(base_dir, RESULTS_DIR, name) for name in OUTPUT_DIRS]


def setup_test_environment(base_dir: Optional[str] = None,
                           echo: Optional[Callable[[str], None]] = None) -> List[str]:
    """
    Make sure the screenshot and report directories exist before tests run.
    :param base_dir: directory holding test-results, defaults to the cwd
    :param echo: sink for the "Created directory" lines
    :return: directories created by this call
    """
    echo = echo or print
    created = []
    for directory in get_output_dirs(base_dir):
        if not os.path.exists(directory):
            os.makedirs(directory)
            echo(f"📁 Created directory: {directory}")
            created.append(directory)
    return created


if __name__ == '__main__':
    setup_test_environment()
