import pytest

from jpt.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        github_token="ghp_testtoken1234",
        jira_url="https://issues.liferay.com",
        jira_browse_url="https://issues.liferay.com/browse",
        cookie_file=tmp_path / "jpt" / "cookies.txt",
        http_timeout=5.0,
    )
