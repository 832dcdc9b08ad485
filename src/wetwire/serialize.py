import collections
import logging

import yaml

import wetwire.contract
import wetwire.errors
import wetwire.resolve
import wetwire.utils
import wetwire.workflow


logger = logging.getLogger(__name__)


def ordered_dict_representer(dumper, data):
    return dumper.represent_mapping('tag:yaml.org,2002:map', data.items())


def str_representer(dumper, data):
    if '\n' in data:
        return dumper.represent_scalar('tag:yaml.org,2002:str', data, style='|')

    return dumper.represent_scalar('tag:yaml.org,2002:str', data, style="")


class TidyOrderedDictDumper(yaml.SafeDumper):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.add_representer(
            collections.OrderedDict,
            ordered_dict_representer,
        )

        self.add_representer(
            str,
            str_representer,
        )

    def ignore_aliases(self, data):
        return True


def step_errors(workflow, key, job):
    for index, step in enumerate(job.steps):
        context = {'workflow': workflow.name, 'job': key, 'step': index}

        if isinstance(step, wetwire.workflow.Step):
            has_uses = not wetwire.utils.is_unset(step.uses)
            has_run = not wetwire.utils.is_unset(step.run)

            if has_uses and has_run:
                yield wetwire.errors.MalformedStep(
                    'step has both uses and run',
                    **context,
                )
            elif not has_uses and not has_run:
                yield wetwire.errors.MalformedStep(
                    'step has neither uses nor run',
                    **context,
                )
            elif has_run and not wetwire.utils.is_unset(step.with_):
                yield wetwire.errors.MalformedStep(
                    'run step has with inputs',
                    **context,
                )
        elif wetwire.contract.is_step_action(step):
            if wetwire.utils.is_unset(step.reference()):
                yield wetwire.errors.MalformedAdapter(
                    '{} returned an empty action reference'.format(
                        type(step).__name__,
                    ),
                    **context,
                )
        else:
            yield wetwire.errors.MalformedStep(
                'step of type {} is neither a Step nor an action'.format(
                    type(step).__name__,
                ),
                **context,
            )


def check(workflow):
    """Yield every error that would stop ``workflow`` from rendering."""
    if len(workflow.on.present()) == 0:
        yield wetwire.errors.MissingTrigger(
            'no trigger is configured',
            workflow=workflow.name,
        )

    index = wetwire.resolve.JobIndex(workflow.jobs)

    for key in sorted(workflow.jobs):
        job = workflow.jobs[key]

        for need in job.needs:
            try:
                wetwire.resolve.resolve_need(index, workflow, key, need)
            except wetwire.errors.WorkflowError as error:
                yield error

        yield from step_errors(workflow, key, job)


def validate(workflow):
    errors = list(check(workflow))

    for error in errors:
        logger.debug('invalid workflow: %s', error)

    return errors


def dump_workflow(workflow, stream=None):
    for error in check(workflow):
        raise error

    logger.debug(
        'rendering workflow %r with %d jobs',
        workflow.name,
        len(workflow.jobs),
    )

    resolved = wetwire.resolve.resolve_workflow(workflow)

    try:
        basic_types = wetwire.workflow.WorkflowSchema().dump(resolved)
        dumped = yaml.dump(
            basic_types,
            sort_keys=False,
            allow_unicode=True,
            width=float('inf'),
            Dumper=TidyOrderedDictDumper,
        )
    except (yaml.YAMLError, TypeError, ValueError) as error:
        raise wetwire.errors.EncodingError(
            'unable to encode workflow: {}'.format(error),
            workflow=workflow.name,
        ) from error

    logger.debug('rendered %d characters', len(dumped))

    if stream is None:
        return dumped

    stream.write(dumped)


def render(workflow):
    return dump_workflow(workflow).encode('utf-8')
