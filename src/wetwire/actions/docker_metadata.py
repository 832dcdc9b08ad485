import attr
import marshmallow

import wetwire.contract


class DockerMetadataSchema(wetwire.contract.InputsSchema):
    context = marshmallow.fields.String()
    images = marshmallow.fields.String()
    tags = marshmallow.fields.String()
    flavor = marshmallow.fields.String()
    labels = marshmallow.fields.String()
    annotations = marshmallow.fields.String()
    sep_tags = marshmallow.fields.String(data_key='sep-tags')
    sep_labels = marshmallow.fields.String(data_key='sep-labels')
    sep_annotations = marshmallow.fields.String(data_key='sep-annotations')
    bake_target = marshmallow.fields.String(data_key='bake-target')


@attr.s(frozen=True)
class DockerMetadata(wetwire.contract.Action):
    action_reference = 'docker/metadata-action@v5'
    inputs_schema = DockerMetadataSchema

    context = attr.ib(default='')
    images = attr.ib(default='')
    tags = attr.ib(default='')
    flavor = attr.ib(default='')
    labels = attr.ib(default='')
    annotations = attr.ib(default='')
    sep_tags = attr.ib(default='')
    sep_labels = attr.ib(default='')
    sep_annotations = attr.ib(default='')
    bake_target = attr.ib(default='')
