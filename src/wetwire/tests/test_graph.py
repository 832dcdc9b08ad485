import pytest

import wetwire.graph
import wetwire.workflow


def test_dot(workflow):
    assert wetwire.graph.graph(workflow) == (
        'digraph workflow {\n'
        '  rankdir=TB;\n'
        '  node [shape=box];\n'
        '\n'
        '  "build";\n'
        '  "deploy";\n'
        '  "test";\n'
        '\n'
        '  "build" -> "deploy";\n'
        '  "test" -> "deploy";\n'
        '  "build" -> "test";\n'
        '}\n'
    )


def test_mermaid(workflow):
    assert wetwire.graph.graph(
        workflow,
        format='mermaid',
        direction='LR',
    ) == (
        'graph LR\n'
        '    build --> deploy\n'
        '    test --> deploy\n'
        '    build --> test\n'
    )


def test_mermaid_without_edges():
    workflow = wetwire.workflow.Workflow(
        on=wetwire.workflow.Triggers(push=wetwire.workflow.Push()),
        jobs={
            'lint': wetwire.workflow.Job(runs_on='ubuntu-latest'),
            'build': wetwire.workflow.Job(runs_on='ubuntu-latest'),
        },
    )

    assert wetwire.graph.graph(workflow, format='mermaid') == (
        'graph TB\n'
        '    build\n'
        '    lint\n'
    )


def test_unknown_format(workflow):
    with pytest.raises(ValueError):
        wetwire.graph.graph(workflow, format='svg')
