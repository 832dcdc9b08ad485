import types

import pytest

import wetwire.discover
import wetwire.workflow


@pytest.mark.parametrize(
    argnames='target, expected',
    argvalues=[
        ['workflows', ('workflows', None)],
        ['ci.workflows:release', ('ci.workflows', 'release')],
        ['path/to/workflows.py:ci', ('path/to/workflows.py', 'ci')],
        [r'C:\repo\workflows.py', (r'C:\repo\workflows.py', None)],
    ],
)
def test_split_target(target, expected):
    assert wetwire.discover.split_target(target) == expected


def test_file_name():
    discovered = wetwire.discover.Discovered(
        attribute='nightly_build',
        workflow=None,
    )

    assert discovered.file_name() == 'nightly-build.yml'


def test_find_workflows(workflow):
    module = types.ModuleType('example')
    module.ci = workflow
    module.release = workflow
    module._private = workflow
    module.job = workflow.jobs['build']

    discovered = wetwire.discover.find_workflows(module)

    assert [entry.attribute for entry in discovered] == ['ci', 'release']


def test_missing_file(tmp_path):
    with pytest.raises(wetwire.discover.DiscoveryError):
        wetwire.discover.load_workflows(str(tmp_path / 'missing.py'))


def test_attribute_not_a_workflow(tmp_path):
    path = tmp_path / 'not_workflows.py'
    path.write_text('value = 42\n')

    with pytest.raises(wetwire.discover.DiscoveryError) as raised:
        wetwire.discover.load_workflows('{}:value'.format(path))

    assert 'not a Workflow' in str(raised.value)


def test_missing_attribute(tmp_path):
    path = tmp_path / 'empty_workflows.py'
    path.write_text('')

    with pytest.raises(wetwire.discover.DiscoveryError):
        wetwire.discover.load_workflows('{}:ci'.format(path))


def test_no_workflows(tmp_path):
    path = tmp_path / 'empty_workflows.py'
    path.write_text('')

    with pytest.raises(wetwire.discover.DiscoveryError) as raised:
        wetwire.discover.load_workflows(str(path))

    assert 'No workflows found' in str(raised.value)
