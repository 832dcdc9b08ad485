"""Inputs for ``actions/checkout``.

The tri-state fields default to ``None`` so that an explicit ``0`` or
``False`` still reaches the rendered ``with`` block.
"""

import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CheckoutSchema(wetwire.contract.InputsSchema):
    repository = marshmallow.fields.String()
    ref = marshmallow.fields.String()
    token = marshmallow.fields.String()
    ssh_key = marshmallow.fields.String(data_key='ssh-key')
    ssh_known_hosts = marshmallow.fields.String(data_key='ssh-known-hosts')
    ssh_strict = wetwire.utils.Boolean(data_key='ssh-strict')
    persist_credentials = wetwire.utils.Boolean(
        data_key='persist-credentials',
        allow_none=True,
        metadata={'explicit': True},
    )
    path = marshmallow.fields.String()
    clean = wetwire.utils.Boolean(
        allow_none=True,
        metadata={'explicit': True},
    )
    filter = marshmallow.fields.String()
    sparse_checkout = marshmallow.fields.String(data_key='sparse-checkout')
    sparse_checkout_cone_mode = wetwire.utils.Boolean(
        data_key='sparse-checkout-cone-mode',
    )
    fetch_depth = wetwire.utils.Integer(
        data_key='fetch-depth',
        allow_none=True,
        metadata={'explicit': True},
    )
    fetch_tags = wetwire.utils.Boolean(data_key='fetch-tags')
    show_progress = wetwire.utils.Boolean(
        data_key='show-progress',
        allow_none=True,
        metadata={'explicit': True},
    )
    lfs = wetwire.utils.Boolean()
    submodules = marshmallow.fields.String()
    set_safe_directory = wetwire.utils.Boolean(
        data_key='set-safe-directory',
        allow_none=True,
        metadata={'explicit': True},
    )
    github_server_url = marshmallow.fields.String(data_key='github-server-url')


@attr.s(frozen=True)
class Checkout(wetwire.contract.Action):
    action_reference = 'actions/checkout@v4'
    inputs_schema = CheckoutSchema

    repository = attr.ib(default='')
    ref = attr.ib(default='')
    token = attr.ib(default='')
    ssh_key = attr.ib(default='')
    ssh_known_hosts = attr.ib(default='')
    ssh_strict = attr.ib(default=False)
    persist_credentials = attr.ib(default=None)
    path = attr.ib(default='')
    clean = attr.ib(default=None)
    filter = attr.ib(default='')
    sparse_checkout = attr.ib(default='')
    sparse_checkout_cone_mode = attr.ib(default=False)
    fetch_depth = attr.ib(default=None)
    fetch_tags = attr.ib(default=False)
    show_progress = attr.ib(default=None)
    lfs = attr.ib(default=False)
    submodules = attr.ib(default='')
    set_safe_directory = attr.ib(default=None)
    github_server_url = attr.ib(default='')
