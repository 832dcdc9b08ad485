import attr
import pytest

import wetwire.errors
import wetwire.resolve
import wetwire.workflow


def job(name, needs=()):
    return wetwire.workflow.Job(
        name=name,
        runs_on='ubuntu-latest',
        needs=needs,
        steps=[wetwire.workflow.Step(run='true')],
    )


def make_workflow(jobs):
    return wetwire.workflow.Workflow(
        name='Resolve',
        on=wetwire.workflow.Triggers(push=wetwire.workflow.Push()),
        jobs=jobs,
    )


def test_resolves_job_values_to_keys(workflow):
    resolved = wetwire.resolve.resolve(workflow)

    assert list(resolved) == ['build', 'deploy', 'test']
    assert list(resolved['build']) == []
    assert list(resolved['deploy']) == ['build', 'test']
    assert list(resolved['test']) == ['build']


def test_declaration_order_kept():
    build = job('Build')
    lint = job('Lint')
    deploy = job('Deploy', needs=[lint, build])

    resolved = wetwire.resolve.resolve(make_workflow({
        'build': build,
        'lint': lint,
        'deploy': deploy,
    }))

    assert list(resolved['deploy']) == ['lint', 'build']


def test_strings_pass_through():
    build = job('Build')
    deploy = job('Deploy', needs=['build'])

    resolved = wetwire.resolve.resolve(make_workflow({
        'build': build,
        'deploy': deploy,
    }))

    assert list(resolved['deploy']) == ['build']


def test_equal_values_match():
    build = job('Build')
    deploy = job('Deploy', needs=[job('Build')])

    resolved = wetwire.resolve.resolve(make_workflow({
        'build': build,
        'deploy': deploy,
    }))

    assert list(resolved['deploy']) == ['build']


def test_dangling_job_value():
    deploy = job('Deploy', needs=[job('Missing')])

    with pytest.raises(wetwire.errors.DanglingReference) as raised:
        wetwire.resolve.resolve(make_workflow({'deploy': deploy}))

    assert raised.value.job == 'deploy'
    assert raised.value.workflow == 'Resolve'
    assert "name='Missing'" in str(raised.value)


def test_dangling_unnamed_job_value_reports_runner():
    orphan = wetwire.workflow.Job(runs_on='windows-latest')
    deploy = job('Deploy', needs=[orphan])

    with pytest.raises(wetwire.errors.DanglingReference) as raised:
        wetwire.resolve.resolve(make_workflow({'deploy': deploy}))

    assert "runs-on='windows-latest'" in str(raised.value)


def test_dangling_string():
    deploy = job('Deploy', needs=['build'])

    with pytest.raises(wetwire.errors.DanglingReference):
        wetwire.resolve.resolve(make_workflow({'deploy': deploy}))


def test_ambiguous_reference():
    build = job('Build')
    deploy = job('Deploy', needs=[build])

    with pytest.raises(wetwire.errors.AmbiguousReference) as raised:
        wetwire.resolve.resolve(make_workflow({
            'build': build,
            'build-again': build,
            'deploy': deploy,
        }))

    assert raised.value.keys == ['build', 'build-again']
    assert raised.value.job == 'deploy'


def test_unreferenced_duplicates_are_allowed():
    build = job('Build')

    resolved = wetwire.resolve.resolve(make_workflow({
        'build': build,
        'build-again': build,
    }))

    assert list(resolved) == ['build', 'build-again']


def test_self_reference_by_key():
    build = job('Build', needs=['build'])

    with pytest.raises(wetwire.errors.SelfReference) as raised:
        wetwire.resolve.resolve(make_workflow({'build': build}))

    assert raised.value.job == 'build'


def test_invalid_reference():
    build = job('Build', needs=[42])

    with pytest.raises(wetwire.errors.InvalidReference):
        wetwire.resolve.resolve(make_workflow({'build': build}))


def test_resolve_workflow_replaces_needs(workflow):
    resolved = wetwire.resolve.resolve_workflow(workflow)

    assert list(resolved.jobs['deploy'].needs) == ['build', 'test']
    assert resolved.jobs['deploy'].name == 'Deploy'
    assert attr.evolve(resolved, jobs=workflow.jobs) == workflow


def test_reference_errors_collects_everything():
    first = job('First', needs=['missing'])
    second = job('Second', needs=[job('Gone')])

    errors = list(wetwire.resolve.reference_errors(make_workflow({
        'first': first,
        'second': second,
    })))

    assert [error.job for error in errors] == ['first', 'second']
