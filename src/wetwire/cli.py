import logging
import pathlib

import click

import wetwire.discover
import wetwire.errors
import wetwire.graph
import wetwire.serialize


def load(target):
    try:
        return wetwire.discover.load_workflows(target)
    except wetwire.discover.DiscoveryError as error:
        raise click.ClickException(str(error)) from error


def load_one(target):
    discovered = load(target)

    if len(discovered) > 1:
        raise click.ClickException(
            'Several workflows found in {}, pick one with {}:<name>: {}'.format(
                target,
                target,
                ', '.join(entry.attribute for entry in discovered),
            ),
        )

    [entry] = discovered

    return entry


def dump(entry):
    try:
        return wetwire.serialize.dump_workflow(entry.workflow)
    except wetwire.errors.WorkflowError as error:
        raise click.ClickException(
            '{}: {}'.format(entry.attribute, error),
        ) from error


@click.group()
@click.option('--debug/--no-debug', default=False, show_default=True)
def cli(debug):
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


@cli.command()
@click.argument('target')
@click.option(
    '--output',
    'output_file',
    type=click.File(mode='w', atomic=True),
    default='-',
    show_default=True,
)
def build(target, output_file):
    entry = load_one(target)
    dumped = dump(entry)
    output_file.write(dumped)


@cli.command(name='build-all')
@click.argument('module')
@click.option(
    '--output-dir',
    'output_directory',
    type=click.Path(file_okay=False),
    default='.github/workflows',
    show_default=True,
)
def build_all(module, output_directory):
    discovered = load(module)
    # render everything before writing anything
    dumped = [(entry, dump(entry)) for entry in discovered]

    output_path = pathlib.Path(output_directory)
    output_path.mkdir(parents=True, exist_ok=True)

    for entry, content in dumped:
        path = output_path / entry.file_name()

        with click.open_file(str(path), mode='w', atomic=True) as file:
            file.write(content)

        click.echo(str(path))


@cli.command()
@click.argument('targets', nargs=-1, required=True)
@click.pass_context
def validate(context, targets):
    failed = False

    for target in targets:
        for entry in load(target):
            for error in wetwire.serialize.validate(entry.workflow):
                failed = True
                click.echo('{}: {}'.format(entry.attribute, error))

    if failed:
        context.exit(1)


@cli.command(name='list')
@click.argument('module')
def list_(module):
    for entry in load(module):
        click.echo('{}\t{}\t{} jobs'.format(
            entry.attribute,
            entry.workflow.name or '',
            len(entry.workflow.jobs),
        ))


@cli.command()
@click.argument('target')
@click.option(
    '--format',
    'graph_format',
    type=click.Choice(wetwire.graph.formats),
    default='dot',
    show_default=True,
)
@click.option(
    '--direction',
    type=click.Choice(wetwire.graph.directions),
    default='TB',
    show_default=True,
)
def graph(target, graph_format, direction):
    entry = load_one(target)

    try:
        rendered = wetwire.graph.graph(
            entry.workflow,
            format=graph_format,
            direction=direction,
        )
    except wetwire.errors.WorkflowError as error:
        raise click.ClickException(
            '{}: {}'.format(entry.attribute, error),
        ) from error

    click.echo(rendered, nl=False)
