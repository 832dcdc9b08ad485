import io

import attr
import pytest
import yaml

import wetwire.actions.actions_rs_toolchain
import wetwire.actions.cache
import wetwire.actions.checkout
import wetwire.actions.upload_artifact
import wetwire.contract
import wetwire.errors
import wetwire.expressions
import wetwire.serialize
import wetwire.workflow


def single_job_workflow(job, key='job'):
    return wetwire.workflow.Workflow(
        name='Single',
        on=wetwire.workflow.Triggers(push=wetwire.workflow.Push()),
        jobs={key: job},
    )


def dumped_job(job, key='job'):
    dumped = wetwire.serialize.dump_workflow(single_job_workflow(job, key))

    return yaml.safe_load(dumped)['jobs'][key]


def test_dump(workflow, ci_yaml):
    dumped_workflow = wetwire.serialize.dump_workflow(workflow)

    assert ci_yaml == dumped_workflow


def test_dump_to_stream(workflow, ci_yaml):
    stream = io.StringIO()

    result = wetwire.serialize.dump_workflow(workflow, stream=stream)

    assert result is None
    assert stream.getvalue() == ci_yaml


def test_render_is_deterministic(workflow):
    assert wetwire.serialize.render(workflow) == wetwire.serialize.render(
        workflow,
    )


def test_render_returns_utf8(workflow, ci_yaml):
    assert wetwire.serialize.render(workflow) == ci_yaml.encode('utf-8')


def test_emitted_needs_are_job_keys(workflow):
    loaded = yaml.safe_load(wetwire.serialize.dump_workflow(workflow))

    for job in loaded['jobs'].values():
        for need in job.get('needs', []):
            assert need in loaded['jobs']


def test_empty_adapter_has_no_with():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[wetwire.actions.actions_rs_toolchain.Toolchain()],
    )

    assert dumped_job(job)['steps'] == [{'uses': 'actions-rs/toolchain@v1'}]


def test_adapter_with_mixed_types():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[
            wetwire.actions.upload_artifact.UploadArtifact(
                path='./build',
                retention_days=7,
                overwrite=False,
                name='',
            ),
        ],
    )

    dumped = wetwire.serialize.dump_workflow(single_job_workflow(job))

    assert (
        '    - uses: actions/upload-artifact@v4\n'
        '      with:\n'
        '        path: ./build\n'
        '        retention-days: 7\n'
    ) in dumped


def test_mixed_step_list():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[
            wetwire.workflow.Step(uses='actions/checkout@v4'),
            wetwire.actions.actions_rs_toolchain.Toolchain(toolchain='stable'),
            wetwire.workflow.Step(run='cargo test'),
        ],
    )

    assert dumped_job(job)['steps'] == [
        {'uses': 'actions/checkout@v4'},
        {'uses': 'actions-rs/toolchain@v1', 'with': {'toolchain': 'stable'}},
        {'run': 'cargo test'},
    ]


def test_multi_line_run_is_literal_block():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[wetwire.workflow.Step(run='a\nb\n')],
    )
    workflow = single_job_workflow(job)

    dumped = wetwire.serialize.dump_workflow(workflow)

    assert '    - run: |\n        a\n        b\n' in dumped

    loaded = yaml.safe_load(dumped)
    assert loaded['jobs']['job']['steps'] == [{'run': 'a\nb\n'}]

    redumped = yaml.dump(
        loaded,
        sort_keys=False,
        allow_unicode=True,
        width=float('inf'),
        Dumper=wetwire.serialize.TidyOrderedDictDumper,
    )
    assert redumped == dumped


def test_step_key_order():
    step = wetwire.workflow.Step(
        shell='bash',
        working_directory='src',
        env={'B': '2', 'A': '1'},
        run='make',
        if_=wetwire.expressions.always(),
        name='Make',
        id='make',
    )
    job = wetwire.workflow.Job(runs_on='ubuntu-latest', steps=[step])

    [dumped_step] = dumped_job(job)['steps']

    assert list(dumped_step) == [
        'id',
        'name',
        'if',
        'run',
        'env',
        'working-directory',
        'shell',
    ]
    assert list(dumped_step['env']) == ['A', 'B']
    assert dumped_step['if'] == 'always()'


def test_expressions_in_boolean_and_integer_inputs():
    step = wetwire.workflow.Step(
        run='make',
        timeout_minutes=wetwire.expressions.inputs['timeout'],
    )
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        timeout_minutes=wetwire.expressions.vars['JOB_TIMEOUT'],
        steps=[
            wetwire.actions.cache.Cache(
                path='p',
                lookup_only=wetwire.expressions.inputs['dry'],
            ),
            wetwire.actions.checkout.Checkout(
                fetch_depth=wetwire.expressions.inputs['depth'],
            ),
            step,
        ],
    )

    dumped = dumped_job(job)

    assert dumped['timeout-minutes'] == '${{ vars.JOB_TIMEOUT }}'
    assert dumped['steps'] == [
        {
            'uses': 'actions/cache@v4',
            'with': {'lookup-only': '${{ inputs.dry }}', 'path': 'p'},
        },
        {
            'uses': 'actions/checkout@v4',
            'with': {'fetch-depth': '${{ inputs.depth }}'},
        },
        {'run': 'make', 'timeout-minutes': '${{ inputs.timeout }}'},
    ]


def test_with_keys_sorted():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[
            wetwire.actions.checkout.Checkout(
                persist_credentials=False,
                fetch_depth=0,
                ref='x',
            ),
            wetwire.workflow.Step(
                uses='example/custom@v1',
                with_={'zeta': 'z', 'alpha': 'a', 'mid': 'm'},
            ),
        ],
    )

    [checkout, custom] = dumped_job(job)['steps']

    assert list(checkout['with']) == [
        'fetch-depth',
        'persist-credentials',
        'ref',
    ]
    assert list(custom['with']) == ['alpha', 'mid', 'zeta']


def test_matrix_axes_sorted():
    job = wetwire.workflow.Job(
        runs_on=wetwire.expressions.matrix['os'],
        strategy=wetwire.workflow.Strategy(
            matrix=wetwire.workflow.Matrix(
                values={
                    'os': ['ubuntu-latest', 'macos-latest'],
                    'go': ['1.22', '1.23'],
                },
                exclude=[{'os': 'macos-latest', 'go': '1.22'}],
            ),
        ),
        steps=[wetwire.workflow.Step(run='true')],
    )

    dumped = dumped_job(job)

    assert dumped['runs-on'] == '${{ matrix.os }}'
    assert list(dumped['strategy']['matrix']) == ['go', 'os', 'exclude']
    assert list(dumped['strategy']['matrix']['exclude'][0]) == ['go', 'os']


def test_whitespace_and_negative_values_are_kept():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        env={'SPACES': '   ', 'OFFSET': -1},
        steps=[wetwire.workflow.Step(run='true')],
    )

    assert dumped_job(job)['env'] == {'OFFSET': -1, 'SPACES': '   '}


def test_job_keys_sorted(workflow):
    loaded = yaml.safe_load(wetwire.serialize.dump_workflow(workflow))

    assert list(loaded) == ['name', 'on', 'jobs']
    assert list(loaded['jobs']) == ['build', 'deploy', 'test']


def test_environment_with_url():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        environment=wetwire.workflow.Environment(
            name='production',
            url='https://example.com',
        ),
        steps=[wetwire.workflow.Step(run='true')],
    )

    assert dumped_job(job)['environment'] == {
        'name': 'production',
        'url': 'https://example.com',
    }


def test_strategy_omits_unset_fail_fast():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        strategy=wetwire.workflow.Strategy(
            matrix=wetwire.workflow.Matrix(
                values={'os': ['ubuntu-latest', 'macos-latest']},
                include=[{'os': 'windows-latest', 'experimental': True}],
            ),
            max_parallel=2,
        ),
        steps=[wetwire.workflow.Step(run='true')],
    )

    assert dumped_job(job)['strategy'] == {
        'matrix': {
            'os': ['ubuntu-latest', 'macos-latest'],
            'include': [{'experimental': True, 'os': 'windows-latest'}],
        },
        'max-parallel': 2,
    }


def test_empty_permissions_are_kept():
    workflow = attr.evolve(
        single_job_workflow(
            wetwire.workflow.Job(
                runs_on='ubuntu-latest',
                steps=[wetwire.workflow.Step(run='true')],
            ),
        ),
        permissions=wetwire.workflow.Permissions(),
    )

    loaded = yaml.safe_load(wetwire.serialize.dump_workflow(workflow))

    assert loaded['permissions'] == {}


def test_present_empty_trigger():
    workflow = wetwire.workflow.Workflow(
        on=wetwire.workflow.Triggers(
            workflow_dispatch=wetwire.workflow.WorkflowDispatch(),
            schedule=[wetwire.workflow.Schedule(cron='0 0 * * *')],
        ),
        jobs={
            'job': wetwire.workflow.Job(
                runs_on='ubuntu-latest',
                steps=[wetwire.workflow.Step(run='true')],
            ),
        },
    )

    loaded = yaml.safe_load(wetwire.serialize.dump_workflow(workflow))

    assert 'name' not in loaded
    assert loaded['on'] == {
        'schedule': [{'cron': '0 0 * * *'}],
        'workflow_dispatch': {},
    }


def test_dangling_reference(build_job):
    orphan = wetwire.workflow.Job(name='Orphan', runs_on='ubuntu-latest')
    deploy = attr.evolve(build_job, name='Deploy', needs=[orphan])
    workflow = single_job_workflow(deploy, key='deploy')
    stream = io.StringIO()

    with pytest.raises(wetwire.errors.DanglingReference) as raised:
        wetwire.serialize.dump_workflow(workflow, stream=stream)

    assert raised.value.job == 'deploy'
    assert "'Orphan'" in str(raised.value)
    assert stream.getvalue() == ''


@pytest.mark.parametrize(
    argnames='step',
    argvalues=[
        wetwire.workflow.Step(),
        wetwire.workflow.Step(uses='actions/checkout@v4', run='true'),
        wetwire.workflow.Step(run='true', with_={'a': 'b'}),
    ],
)
def test_malformed_step(step):
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[wetwire.workflow.Step(run='true'), step],
    )

    with pytest.raises(wetwire.errors.MalformedStep) as raised:
        wetwire.serialize.dump_workflow(single_job_workflow(job))

    assert raised.value.job == 'job'
    assert raised.value.step == 1
    assert raised.value.workflow == 'Single'


@attr.s(frozen=True)
class Unreferenced(wetwire.contract.Action):
    pass


def test_malformed_adapter():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        steps=[Unreferenced()],
    )

    with pytest.raises(wetwire.errors.MalformedAdapter) as raised:
        wetwire.serialize.dump_workflow(single_job_workflow(job))

    assert raised.value.step == 0


def test_missing_trigger():
    workflow = wetwire.workflow.Workflow(
        on=wetwire.workflow.Triggers(),
        jobs={
            'job': wetwire.workflow.Job(
                runs_on='ubuntu-latest',
                steps=[wetwire.workflow.Step(run='true')],
            ),
        },
    )

    with pytest.raises(wetwire.errors.MissingTrigger):
        wetwire.serialize.dump_workflow(workflow)


def test_unencodable_value():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        env={'WHEN': object()},
        steps=[wetwire.workflow.Step(run='true')],
    )

    with pytest.raises(wetwire.errors.EncodingError):
        wetwire.serialize.dump_workflow(single_job_workflow(job))


def test_validate_collects_all_errors():
    job = wetwire.workflow.Job(
        runs_on='ubuntu-latest',
        needs=['missing'],
        steps=[wetwire.workflow.Step(), Unreferenced()],
    )
    workflow = attr.evolve(
        single_job_workflow(job),
        on=wetwire.workflow.Triggers(),
    )

    errors = wetwire.serialize.validate(workflow)

    assert [type(error) for error in errors] == [
        wetwire.errors.MissingTrigger,
        wetwire.errors.DanglingReference,
        wetwire.errors.MalformedStep,
        wetwire.errors.MalformedAdapter,
    ]


def test_validate_valid(workflow):
    assert wetwire.serialize.validate(workflow) == []
