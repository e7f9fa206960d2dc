"""Tests for the Jira issue, transition and search result models."""

from mcp_jira_tasks.models.jira import JiraSearchResult, JiraTask, JiraTransition
from mcp_jira_tasks.models.jira import issue as issue_module
from tests.utils.factories import JiraIssueFactory, JiraTransitionFactory


class TestJiraTask:
    """Tests for the JiraTask model."""

    def test_from_api_response_with_full_data(self):
        task = JiraTask.from_api_response(JiraIssueFactory.create())

        assert task.key == "TEST-123"
        assert task.summary == "Test Issue Summary"
        assert task.description == "Test issue description"
        assert task.status == "Open"
        assert task.assignee == "Test User"
        assert task.assignee_account_id == "5b10ac8d82e05b22cc7d4ef5"
        assert task.priority == "High"
        assert task.issue_type == "Task"
        assert task.project_key == "TEST"
        assert task.project_name == "Test Project"
        assert task.progress_percent == 25
        assert task.is_assigned

    def test_from_api_response_with_minimal_data(self):
        task = JiraTask.from_api_response(JiraIssueFactory.create_minimal("MIN-1"))

        assert task.key == "MIN-1"
        assert task.summary == "Test Issue"
        assert task.status == "Open"
        assert task.assignee is None
        assert task.priority is None
        assert task.progress_percent is None
        assert task.description is None
        assert not task.is_assigned

    def test_null_objects_are_tolerated(self):
        data = JiraIssueFactory.create(
            fields={"assignee": None, "priority": None, "progress": None}
        )

        task = JiraTask.from_api_response(data)

        assert task.assignee is None
        assert task.priority is None
        assert task.progress_percent is None
        assert not task.is_assigned

    def test_plain_string_description(self):
        data = JiraIssueFactory.create(fields={"description": "Legacy text"})
        assert JiraTask.from_api_response(data).description == "Legacy text"

    def test_empty_description_becomes_none(self):
        data = JiraIssueFactory.create(fields={"description": ""})
        assert JiraTask.from_api_response(data).description is None

    def test_from_api_response_with_invalid_data(self):
        assert JiraTask.from_api_response(None) == JiraTask()
        assert JiraTask.from_api_response("TEST-1") == JiraTask()

    def test_model_logger_is_under_package_logger(self):
        assert issue_module.logger.name == "mcp-jira-tasks.models"


class TestJiraTransition:
    def test_from_api_response(self):
        data = JiraTransitionFactory.create("In Progress")["transitions"][0]

        transition = JiraTransition.from_api_response(data)

        assert transition.id == "11"
        assert transition.name == "Move to In Progress"
        assert transition.to_status == "In Progress"

    def test_numeric_id_is_stringified(self):
        transition = JiraTransition.from_api_response(
            {"id": 31, "name": "Close", "to": {"name": "Closed"}}
        )
        assert transition.id == "31"

    def test_leads_to_ignores_case(self):
        transition = JiraTransition(id="11", name="Start", to_status="In Progress")

        assert transition.leads_to("in progress")
        assert transition.leads_to("IN PROGRESS")
        assert not transition.leads_to("Done")

    def test_transition_name_is_not_matched(self):
        transition = JiraTransition(id="11", name="Start work", to_status="In Progress")
        assert not transition.leads_to("Start work")


class TestJiraSearchResult:
    def test_from_api_response(self):
        data = {
            "issues": [
                JiraIssueFactory.create("PROJ-2"),
                JiraIssueFactory.create("PROJ-1"),
            ],
            "isLast": True,
        }

        result = JiraSearchResult.from_api_response(data)

        assert [issue.key for issue in result.issues] == ["PROJ-2", "PROJ-1"]

    def test_empty_response(self):
        assert JiraSearchResult.from_api_response({}).issues == []
