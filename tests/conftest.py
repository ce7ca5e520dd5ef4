import pytest
import os
import sys

# Select the testing configuration before the package is imported
os.environ['PIPELINE_ENV'] = 'testing'

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

@pytest.fixture
def wp_user():
    return {'id': 7, 'name': 'Content Bot', 'slug': 'content-bot'}

@pytest.fixture
def mock_wp_get(mocker, wp_user):
    """Mock a successful GET /users/me"""
    response = mocker.Mock(ok=True, status_code=200, reason='OK')
    response.json.return_value = wp_user
    return mocker.patch('pipeline_setup.wordpress.requests.get', return_value=response)

@pytest.fixture
def mock_subprocess(mocker):
    """Mock the secrets CLI process"""
    completed = mocker.Mock(stdout='Finished supabase secrets set.\n', stderr='', returncode=0)
    return mocker.patch('pipeline_setup.secrets_cli.subprocess.run', return_value=completed)

def secrets_set(mock_run):
    """KEY=VALUE arguments passed to the mocked secrets CLI, in call order"""
    return [call.args[0][-1] for call in mock_run.call_args_list]
