"""Turn the Job values listed in ``needs`` into job keys.

Jobs are matched by value: a ``needs`` entry refers to whichever key of
``Workflow.jobs`` holds an equal Job.  String entries are taken as keys
as they are.  Declaration order is kept.
"""

import collections
import logging

import attr

from pyrsistent import pvector

import wetwire.errors
import wetwire.utils
import wetwire.workflow


logger = logging.getLogger(__name__)


def describe_job(job):
    if not wetwire.utils.is_unset(job.name):
        return 'name={!r}'.format(job.name)

    return 'runs-on={!r}'.format(wetwire.utils.serialize_value(job.runs_on))


class JobIndex:
    def __init__(self, jobs):
        self.entries = [(key, jobs[key]) for key in sorted(jobs)]

    def keys_for(self, job):
        return [
            key
            for key, candidate in self.entries
            if candidate is job or candidate == job
        ]


def resolve_need(index, workflow, key, need):
    context = {'workflow': workflow.name, 'job': key}

    if isinstance(need, str):
        resolved = need
    elif isinstance(need, wetwire.workflow.Job):
        keys = index.keys_for(need)

        if len(keys) == 0:
            raise wetwire.errors.DanglingReference(
                'needs a job that is not in the workflow ({})'.format(
                    describe_job(need),
                ),
                **context,
            )

        if len(keys) > 1:
            raise wetwire.errors.AmbiguousReference(
                'needs a job that appears under several keys: {}'.format(
                    ', '.join(repr(k) for k in keys),
                ),
                keys=keys,
                **context,
            )

        [resolved] = keys
    else:
        raise wetwire.errors.InvalidReference(
            'needs entry {!r} is neither a job key nor a Job'.format(need),
            **context,
        )

    if resolved == key:
        raise wetwire.errors.SelfReference('needs itself', **context)

    if resolved not in workflow.jobs:
        raise wetwire.errors.DanglingReference(
            'needs unknown job {!r}'.format(resolved),
            **context,
        )

    return resolved


def reference_errors(workflow):
    index = JobIndex(workflow.jobs)

    for key in sorted(workflow.jobs):
        for need in workflow.jobs[key].needs:
            try:
                resolve_need(index, workflow, key, need)
            except wetwire.errors.WorkflowError as error:
                yield error


def resolve(workflow):
    """Map each job key to its resolved ``needs`` keys.

    Raises the first reference error found, in job key order.
    """
    index = JobIndex(workflow.jobs)
    resolved = collections.OrderedDict()

    for key in sorted(workflow.jobs):
        resolved[key] = pvector(
            resolve_need(index, workflow, key, need)
            for need in workflow.jobs[key].needs
        )
        logger.debug('resolved needs of %r: %s', key, list(resolved[key]))

    return resolved


def resolve_workflow(workflow):
    resolved = resolve(workflow)

    return attr.evolve(
        workflow,
        jobs={
            key: attr.evolve(job, needs=resolved[key])
            for key, job in workflow.jobs.items()
        },
    )
