class WorkflowError(Exception):
    """A workflow that cannot be rendered.

    ``workflow``, ``job`` and ``step`` locate the defect: the workflow
    display name, the authored job key and the zero-based step index.  Any
    of them may be ``None`` when the error is not tied to that level.
    """

    def __init__(self, message, workflow=None, job=None, step=None):
        super().__init__(message)
        self.message = message
        self.workflow = workflow
        self.job = job
        self.step = step

    def location(self):
        pieces = []

        if self.workflow is not None:
            pieces.append('workflow {!r}'.format(self.workflow))
        if self.job is not None:
            pieces.append('job {!r}'.format(self.job))
        if self.step is not None:
            pieces.append('step {}'.format(self.step))

        return ', '.join(pieces)

    def __str__(self):
        location = self.location()

        if location == '':
            return self.message

        return '{}: {}'.format(location, self.message)


class DanglingReference(WorkflowError):
    pass


class AmbiguousReference(WorkflowError):
    def __init__(self, message, keys, **kwargs):
        super().__init__(message, **kwargs)
        self.keys = keys


class SelfReference(WorkflowError):
    pass


class InvalidReference(WorkflowError):
    pass


class MalformedStep(WorkflowError):
    pass


class MalformedAdapter(WorkflowError):
    pass


class MissingTrigger(WorkflowError):
    pass


class EncodingError(WorkflowError):
    pass
