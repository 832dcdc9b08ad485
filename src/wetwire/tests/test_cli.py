import textwrap

import pytest
import yaml
from click.testing import CliRunner

import wetwire.cli


workflows_source = textwrap.dedent('''\
    import wetwire.actions.checkout
    import wetwire.workflow


    build = wetwire.workflow.Job(
        name='Build',
        runs_on='ubuntu-latest',
        steps=[
            wetwire.actions.checkout.Checkout(),
            wetwire.workflow.Step(run='make'),
        ],
    )

    release = wetwire.workflow.Job(
        name='Release',
        runs_on='ubuntu-latest',
        needs=[build],
        steps=[wetwire.workflow.Step(run='make release')],
    )

    ci = wetwire.workflow.Workflow(
        name='CI',
        on=wetwire.workflow.Triggers(push=wetwire.workflow.Push()),
        jobs={'build': build, 'release': release},
    )

    nightly_build = wetwire.workflow.Workflow(
        name='Nightly',
        on=wetwire.workflow.Triggers(
            schedule=[wetwire.workflow.Schedule(cron='0 3 * * *')],
        ),
        jobs={'build': build},
    )
''')


broken_source = textwrap.dedent('''\
    import wetwire.workflow


    broken = wetwire.workflow.Workflow(
        name='Broken',
        on=wetwire.workflow.Triggers(),
        jobs={
            'build': wetwire.workflow.Job(
                runs_on='ubuntu-latest',
                steps=[wetwire.workflow.Step()],
            ),
        },
    )
''')


@pytest.fixture
def workflows_path(tmp_path):
    path = tmp_path / 'ci_workflows.py'
    path.write_text(workflows_source)

    return path


@pytest.fixture
def broken_path(tmp_path):
    path = tmp_path / 'broken_workflows.py'
    path.write_text(broken_source)

    return path


def test_build(workflows_path):
    runner = CliRunner()

    result = runner.invoke(
        wetwire.cli.cli,
        ['build', '{}:ci'.format(workflows_path)],
    )

    assert result.exit_code == 0, result.output
    loaded = yaml.safe_load(result.output)
    assert loaded['name'] == 'CI'
    assert loaded['jobs']['release']['needs'] == ['build']


def test_build_to_file(workflows_path, tmp_path):
    runner = CliRunner()
    output = tmp_path / 'ci.yml'

    result = runner.invoke(
        wetwire.cli.cli,
        [
            'build',
            '{}:nightly_build'.format(workflows_path),
            '--output',
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    loaded = yaml.safe_load(output.read_text())
    assert loaded['on'] == {'schedule': [{'cron': '0 3 * * *'}]}


def test_build_requires_single_workflow(workflows_path):
    runner = CliRunner()

    result = runner.invoke(wetwire.cli.cli, ['build', str(workflows_path)])

    assert result.exit_code == 1
    assert 'ci, nightly_build' in result.output


def test_build_reports_errors(broken_path):
    runner = CliRunner()

    result = runner.invoke(wetwire.cli.cli, ['build', str(broken_path)])

    assert result.exit_code == 1
    assert 'broken:' in result.output
    assert 'no trigger is configured' in result.output


def test_build_all(workflows_path, tmp_path):
    runner = CliRunner()
    output_directory = tmp_path / 'workflows'

    result = runner.invoke(
        wetwire.cli.cli,
        [
            'build-all',
            str(workflows_path),
            '--output-dir',
            str(output_directory),
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(path.name for path in output_directory.iterdir()) == [
        'ci.yml',
        'nightly-build.yml',
    ]
    assert str(output_directory / 'ci.yml') in result.output


def test_build_all_writes_nothing_on_error(broken_path, tmp_path):
    runner = CliRunner()
    output_directory = tmp_path / 'workflows'

    result = runner.invoke(
        wetwire.cli.cli,
        [
            'build-all',
            str(broken_path),
            '--output-dir',
            str(output_directory),
        ],
    )

    assert result.exit_code == 1
    assert not output_directory.exists()


def test_validate(workflows_path):
    runner = CliRunner()

    result = runner.invoke(wetwire.cli.cli, ['validate', str(workflows_path)])

    assert result.exit_code == 0, result.output
    assert result.output == ''


def test_validate_reports_every_error(broken_path):
    runner = CliRunner()

    result = runner.invoke(wetwire.cli.cli, ['validate', str(broken_path)])

    assert result.exit_code == 1
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert all(line.startswith('broken: ') for line in lines)
    assert 'step has neither uses nor run' in lines[1]


def test_list(workflows_path):
    runner = CliRunner()

    result = runner.invoke(wetwire.cli.cli, ['list', str(workflows_path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        'ci\tCI\t2 jobs',
        'nightly_build\tNightly\t1 jobs',
    ]


def test_graph(workflows_path):
    runner = CliRunner()

    result = runner.invoke(
        wetwire.cli.cli,
        ['graph', '{}:ci'.format(workflows_path), '--format', 'mermaid'],
    )

    assert result.exit_code == 0, result.output
    assert result.output == 'graph TB\n    build --> release\n'


def test_missing_module():
    runner = CliRunner()

    result = runner.invoke(
        wetwire.cli.cli,
        ['build', 'no_such_module_for_wetwire'],
    )

    assert result.exit_code == 1
    assert 'Unable to import' in result.output
