import importlib
import pkgutil

import attr
import marshmallow
import pytest

import wetwire.actions
import wetwire.actions.actions_rs_toolchain
import wetwire.actions.cache
import wetwire.actions.cargo
import wetwire.actions.checkout
import wetwire.actions.setup_go
import wetwire.actions.setup_rust
import wetwire.contract
import wetwire.expressions
import wetwire.utils


def all_actions():
    found = []

    for module_info in pkgutil.iter_modules(wetwire.actions.__path__):
        module = importlib.import_module(
            'wetwire.actions.{}'.format(module_info.name),
        )

        for value in vars(module).values():
            if (
                    isinstance(value, type)
                    and issubclass(value, wetwire.contract.Action)
                    and value.__module__ == module.__name__
            ):
                found.append(value)

    return sorted(found, key=lambda action: action.__name__)


actions = all_actions()


set_values = {
    marshmallow.fields.String: 'value',
    wetwire.utils.Boolean: True,
    wetwire.utils.Integer: 5,
}


def test_catalog_is_populated():
    assert len(actions) > 70


@pytest.mark.parametrize(
    argnames='action',
    argvalues=actions,
    ids=[action.__name__ for action in actions],
)
def test_defaults_produce_no_inputs(action):
    instance = action()

    assert wetwire.contract.is_step_action(instance)
    assert instance.inputs() == {}
    assert instance.reference() != ''


@pytest.mark.parametrize(
    argnames='action',
    argvalues=actions,
    ids=[action.__name__ for action in actions],
)
def test_set_values_are_passed_through(action):
    schema = action.inputs_schema()
    values = {
        name: set_values[type(field)]
        for name, field in schema.fields.items()
    }

    instance = action(**values)

    assert instance.inputs() == {
        field.data_key or name: values[name]
        for name, field in schema.fields.items()
    }
    assert instance.reference() == action().reference()


def test_checkout_inputs():
    checkout = wetwire.actions.checkout.Checkout(
        ref='main',
        token=str(wetwire.expressions.secrets.GITHUB_TOKEN),
        ssh_strict=False,
        submodules='',
    )

    assert checkout.inputs() == {
        'ref': 'main',
        'token': '${{ secrets.GITHUB_TOKEN }}',
    }


def test_checkout_explicit_zero_and_false():
    checkout = wetwire.actions.checkout.Checkout(
        fetch_depth=0,
        persist_credentials=False,
    )

    assert checkout.inputs() == {
        'persist-credentials': False,
        'fetch-depth': 0,
    }


def test_setup_go_cache_disabled():
    setup_go = wetwire.actions.setup_go.SetupGo(go_version='1.23', cache=False)

    assert setup_go.inputs() == {'go-version': '1.23', 'cache': False}


def test_cache_inputs():
    cache = wetwire.actions.cache.Cache(
        path='~/.cache',
        key='deps',
        upload_chunk_size=0,
        lookup_only=False,
    )

    assert cache.inputs() == {'path': '~/.cache', 'key': 'deps'}


def test_negative_integer_kept():
    cache = wetwire.actions.cache.Cache(upload_chunk_size=-1)

    assert cache.inputs() == {'upload-chunk-size': -1}


def test_expression_in_boolean_input():
    cache = wetwire.actions.cache.Cache(
        path='p',
        lookup_only=wetwire.expressions.inputs['dry'],
    )

    assert cache.inputs() == {
        'path': 'p',
        'lookup-only': '${{ inputs.dry }}',
    }


def test_expression_text_in_boolean_input():
    cache = wetwire.actions.cache.Cache(lookup_only='${{ inputs.dry }}')

    assert cache.inputs() == {'lookup-only': '${{ inputs.dry }}'}


def test_expression_in_integer_input():
    checkout = wetwire.actions.checkout.Checkout(
        fetch_depth=wetwire.expressions.inputs['depth'],
    )
    upload_chunk = wetwire.actions.cache.Cache(upload_chunk_size='${{ 1 }}')

    assert checkout.inputs() == {'fetch-depth': '${{ inputs.depth }}'}
    assert upload_chunk.inputs() == {'upload-chunk-size': '${{ 1 }}'}


def test_whitespace_string_kept():
    checkout = wetwire.actions.checkout.Checkout(path='  ')

    assert checkout.inputs() == {'path': '  '}


@pytest.mark.parametrize(
    argnames='preset, toolchain',
    argvalues=[
        [wetwire.actions.actions_rs_toolchain.Toolchain.stable, 'stable'],
        [wetwire.actions.actions_rs_toolchain.Toolchain.nightly, 'nightly'],
        [wetwire.actions.actions_rs_toolchain.Toolchain.beta, 'beta'],
        [wetwire.actions.setup_rust.SetupRust.stable, 'stable'],
        [wetwire.actions.setup_rust.SetupRust.nightly, 'nightly'],
        [wetwire.actions.setup_rust.SetupRust.beta, 'beta'],
    ],
)
def test_toolchain_presets(preset, toolchain):
    assert preset().inputs() == {'toolchain': toolchain}


def test_preset_accepts_other_fields():
    toolchain = wetwire.actions.setup_rust.SetupRust.nightly(
        components='rustfmt, clippy',
    )

    assert toolchain == wetwire.actions.setup_rust.SetupRust(
        toolchain='nightly',
        components='rustfmt, clippy',
    )


@pytest.mark.parametrize(
    argnames='command',
    argvalues=['build', 'test', 'check', 'clippy', 'fmt'],
)
def test_cargo_presets(command):
    preset = getattr(wetwire.actions.cargo.Cargo, command)

    assert preset().inputs() == {'command': command}


def test_actions_are_frozen():
    checkout = wetwire.actions.checkout.Checkout()

    with pytest.raises(attr.exceptions.FrozenInstanceError):
        checkout.ref = 'main'


@attr.s(frozen=True)
class Custom:
    version = attr.ib(default='')

    def reference(self):
        return 'example/custom@v1'

    def inputs(self):
        if self.version == '':
            return {}

        return {'version': self.version}


def test_duck_typed_action():
    assert wetwire.contract.is_step_action(Custom())
    assert not wetwire.contract.is_step_action(object())
