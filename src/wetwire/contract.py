"""The interface shared by every reusable action wrapper.

A wrapper is a frozen ``attrs`` value with one attribute per input of the
wrapped action and a marshmallow schema that maps those attributes onto the
action's input names.  The workflow model accepts any object that has a
``reference()`` and an ``inputs()`` method as a step, so wrappers do not
need to subclass :class:`Action`; doing so just supplies both methods.

An input is left out of ``inputs()`` while it holds its unset value: the
empty string, integer zero or ``False``.  Inputs whose schema field is
marked ``explicit`` use ``None`` as their unset value instead, so that an
explicit ``0`` or ``False`` reaches the runner.
"""

import typing

import attr
import marshmallow

import wetwire.utils


@typing.runtime_checkable
class StepAction(typing.Protocol):
    def reference(self) -> str:
        ...

    def inputs(self) -> typing.Mapping[str, typing.Any]:
        ...


def is_step_action(value):
    return isinstance(value, StepAction)


class InputsSchema(marshmallow.Schema):
    class Meta:
        ordered = True

    post_dump = wetwire.utils.post_dump_remove_unset_values


@attr.s(frozen=True)
class Action:
    action_reference = ''
    inputs_schema = InputsSchema

    def reference(self) -> str:
        return self.action_reference

    def inputs(self) -> typing.Dict[str, typing.Any]:
        return dict(self.inputs_schema().dump(self))
