"""
Pytest configuration for Monkey tests.
"""
import sys
import os
import tempfile

# Make `import monkey...` work from a plain checkout (src/ on sys.path)
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)

# Keep the user's ~/.monkey/config.json out of the test run
os.environ['MONKEY_CONFIG'] = os.path.join(tempfile.mkdtemp(prefix='monkey-test-'), 'config.json')
