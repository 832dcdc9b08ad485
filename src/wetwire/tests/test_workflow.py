import attr
import pyrsistent
import pytest

import wetwire.actions.checkout
import wetwire.expressions
import wetwire.workflow


def test_job_collections_are_frozen(build_job):
    assert isinstance(build_job.steps, pyrsistent.PVector)

    with pytest.raises(attr.exceptions.FrozenInstanceError):
        build_job.name = 'Other'


def test_jobs_compare_by_value(build_job):
    rebuilt = wetwire.workflow.Job(
        name='Build',
        runs_on='ubuntu-latest',
        steps=list(build_job.steps),
    )

    assert rebuilt == build_job
    assert rebuilt is not build_job


def test_step_output_requires_id():
    with pytest.raises(ValueError):
        wetwire.workflow.Step(run='true').output('version')


def test_step_output():
    step = wetwire.workflow.Step(id='meta', run='echo version=1')

    assert step.output('version') == wetwire.expressions.steps.output(
        'meta',
        'version',
    )


def test_to_step():
    step = wetwire.workflow.to_step(
        wetwire.actions.checkout.Checkout(ref='main'),
        name='Checkout',
    )

    assert step == wetwire.workflow.Step(
        uses='actions/checkout@v4',
        with_={'ref': 'main'},
        name='Checkout',
    )


def test_runs_on_labels_frozen():
    job = wetwire.workflow.Job(runs_on=['self-hosted', 'linux'])

    assert job.runs_on == pyrsistent.pvector(['self-hosted', 'linux'])


@pytest.mark.parametrize(
    argnames='on',
    argvalues=[None, {'push': {}}],
)
def test_workflow_requires_triggers(on):
    with pytest.raises(TypeError):
        wetwire.workflow.Workflow(name='P', on=on, jobs={})


def test_timeouts_accept_expressions():
    timeout = wetwire.expressions.inputs['timeout']

    assert wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        timeout_minutes=timeout,
    ).timeout_minutes == timeout

    with pytest.raises(TypeError):
        wetwire.workflow.Step(run='true', timeout_minutes='ten')


def test_strategy_rejects_non_bool_fail_fast():
    with pytest.raises(TypeError):
        wetwire.workflow.Strategy(fail_fast='no')


def test_triggers_present():
    triggers = wetwire.workflow.Triggers(
        push=wetwire.workflow.Push(),
        release=wetwire.workflow.Event(types=['published']),
    )

    assert triggers.present() == ['push', 'release']


def test_triggers_present_empty():
    assert wetwire.workflow.Triggers().present() == []


def test_unexpected_step_type_selector():
    with pytest.raises(TypeError):
        wetwire.workflow.job_steps_serialization_schema_selector(
            object(),
            None,
        )


def test_workflow_call_dump():
    call = wetwire.workflow.WorkflowCall(
        inputs={
            'version': wetwire.workflow.WorkflowInput(
                type='string',
                required=True,
            ),
            'debug': wetwire.workflow.WorkflowInput(
                type='boolean',
                default=False,
            ),
        },
        secrets={'token': wetwire.workflow.WorkflowSecret(required=True)},
    )

    dumped = wetwire.workflow.WorkflowCallSchema().dump(call)

    assert dumped == {
        'inputs': {
            'debug': {'default': False, 'type': 'boolean'},
            'version': {'required': True, 'type': 'string'},
        },
        'secrets': {'token': {'required': True}},
    }
    assert list(dumped['inputs']) == ['debug', 'version']


def test_container_dump():
    container = wetwire.workflow.Container(
        image='postgres:16',
        env={'POSTGRES_PASSWORD': wetwire.expressions.secrets['DB']},
        ports=[5432],
    )

    dumped = wetwire.workflow.ContainerSchema().dump(container)

    assert dumped == {
        'image': 'postgres:16',
        'env': {'POSTGRES_PASSWORD': '${{ secrets.DB }}'},
        'ports': [5432],
    }


def test_concurrency_dump():
    concurrency = wetwire.workflow.Concurrency(
        group=wetwire.expressions.github.ref,
        cancel_in_progress=True,
    )

    assert wetwire.workflow.dump_concurrency(concurrency) == {
        'group': '${{ github.ref }}',
        'cancel-in-progress': True,
    }
    assert wetwire.workflow.dump_concurrency('deploy') == 'deploy'


def test_permissions_dump():
    permissions = wetwire.workflow.Permissions(
        contents=wetwire.workflow.read,
        id_token=wetwire.workflow.write,
    )

    assert wetwire.workflow.dump_permissions(permissions) == {
        'contents': 'read',
        'id-token': 'write',
    }
    assert wetwire.workflow.dump_permissions('read-all') == 'read-all'
