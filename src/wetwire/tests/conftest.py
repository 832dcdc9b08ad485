import importlib_resources
import pytest

import wetwire.actions.checkout
import wetwire.actions.setup_go
import wetwire.expressions
import wetwire.tests.data
import wetwire.workflow


@pytest.fixture
def build_job():
    return wetwire.workflow.Job(
        name='Build',
        runs_on='ubuntu-latest',
        steps=[
            wetwire.actions.checkout.Checkout(),
            wetwire.actions.setup_go.SetupGo(go_version='1.23'),
            wetwire.workflow.Step(name='Build', run='go build ./...'),
        ],
    )


@pytest.fixture
def check_job(build_job):
    return wetwire.workflow.Job(
        name='Test',
        runs_on='ubuntu-latest',
        needs=[build_job],
        strategy=wetwire.workflow.Strategy(
            matrix=wetwire.workflow.Matrix(values={'go': ['1.22', '1.23']}),
            fail_fast=False,
        ),
        steps=[
            wetwire.actions.checkout.Checkout(fetch_depth=0),
            wetwire.actions.setup_go.SetupGo(
                go_version=wetwire.expressions.matrix['go'],
            ),
            wetwire.workflow.Step(
                name='Test',
                run='go test ./...\ngo vet ./...\n',
            ),
        ],
    )


@pytest.fixture
def deploy_job(build_job, check_job):
    return wetwire.workflow.Job(
        name='Deploy',
        runs_on='ubuntu-latest',
        needs=[build_job, check_job],
        if_=wetwire.expressions.branch('main'),
        environment=wetwire.workflow.Environment(name='production'),
        steps=[wetwire.workflow.Step(run='echo deploying')],
    )


@pytest.fixture
def triggers():
    return wetwire.workflow.Triggers(
        push=wetwire.workflow.Push(branches=['main']),
        pull_request=wetwire.workflow.PullRequest(branches=['main']),
    )


@pytest.fixture
def workflow(triggers, build_job, check_job, deploy_job):
    return wetwire.workflow.Workflow(
        name='CI',
        on=triggers,
        jobs={
            'build': build_job,
            'test': check_job,
            'deploy': deploy_job,
        },
    )


@pytest.fixture
def ci_yaml():
    opened_text = importlib_resources.open_text(
        wetwire.tests.data,
        'ci.yml',
    )

    with opened_text as file:
        content = file.read()

    return content
