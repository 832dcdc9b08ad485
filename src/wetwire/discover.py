import importlib
import importlib.util
import logging
import os
import pathlib
import sys

import attr

import wetwire.workflow


logger = logging.getLogger(__name__)


class DiscoveryError(Exception):
    pass


@attr.s(frozen=True)
class Discovered:
    attribute = attr.ib()
    workflow = attr.ib()

    def file_name(self):
        return '{}.yml'.format(self.attribute.replace('_', '-'))


def is_path(name):
    return name.endswith('.py') or os.sep in name or '/' in name


def load_module(name):
    if is_path(name):
        path = pathlib.Path(name).resolve()
        if not path.is_file():
            raise DiscoveryError('No such file: {}'.format(name))

        # let the file import its siblings
        directory = str(path.parent)
        if directory not in sys.path:
            sys.path.insert(0, directory)

        spec = importlib.util.spec_from_file_location(path.stem, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        return module

    working_directory = os.getcwd()
    if working_directory not in sys.path:
        sys.path.insert(0, working_directory)

    try:
        return importlib.import_module(name)
    except ImportError as error:
        raise DiscoveryError(
            'Unable to import {!r}: {}'.format(name, error),
        ) from error


def split_target(target):
    module, separator, attribute = target.rpartition(':')

    if separator == '' or not attribute.isidentifier():
        return target, None

    return module, attribute


def find_workflows(module):
    discovered = [
        Discovered(attribute=name, workflow=value)
        for name, value in sorted(vars(module).items())
        if not name.startswith('_')
        if isinstance(value, wetwire.workflow.Workflow)
    ]

    logger.debug(
        'found %d workflows in %s',
        len(discovered),
        module.__name__,
    )

    return discovered


def load_workflows(target):
    """Load ``module:attribute`` or every workflow defined in ``module``."""
    module_name, attribute = split_target(target)
    module = load_module(module_name)

    if attribute is None:
        discovered = find_workflows(module)

        if len(discovered) == 0:
            raise DiscoveryError('No workflows found in {}'.format(target))

        return discovered

    try:
        value = getattr(module, attribute)
    except AttributeError as error:
        raise DiscoveryError(
            '{} has no attribute {!r}'.format(module_name, attribute),
        ) from error

    if not isinstance(value, wetwire.workflow.Workflow):
        raise DiscoveryError(
            '{} is a {}, not a Workflow'.format(target, type(value).__name__),
        )

    return [Discovered(attribute=attribute, workflow=value)]
