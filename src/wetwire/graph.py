import json

import wetwire.resolve


formats = ('dot', 'mermaid')
directions = ('TB', 'BT', 'LR', 'RL')


def edges(resolved):
    return [
        (need, key)
        for key, needs in resolved.items()
        for need in needs
    ]


def to_dot(resolved, direction='TB'):
    lines = [
        'digraph workflow {',
        '  rankdir={};'.format(direction),
        '  node [shape=box];',
        '',
    ]
    lines.extend('  {};'.format(json.dumps(key)) for key in resolved)
    lines.append('')
    lines.extend(
        '  {} -> {};'.format(json.dumps(need), json.dumps(key))
        for need, key in edges(resolved)
    )
    lines.append('}')

    return '\n'.join(lines) + '\n'


def to_mermaid(resolved, direction='TB'):
    lines = ['graph {}'.format(direction)]

    dependencies = edges(resolved)
    if len(dependencies) > 0:
        lines.extend(
            '    {} --> {}'.format(need, key)
            for need, key in dependencies
        )
    else:
        lines.extend('    {}'.format(key) for key in resolved)

    return '\n'.join(lines) + '\n'


def graph(workflow, format='dot', direction='TB'):
    if format not in formats:
        raise ValueError('Unexpected graph format: {!r}'.format(format))

    resolved = wetwire.resolve.resolve(workflow)

    if format == 'dot':
        return to_dot(resolved, direction=direction)

    return to_mermaid(resolved, direction=direction)
