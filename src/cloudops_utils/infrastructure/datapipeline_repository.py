#!/usr/bin/env python3
"""
Data Pipeline and Elasticsearch repositories.

Both services are driven from request documents kept in configuration files.
"""

import logging
from typing import Any

from cloudops_utils.domain.errors import PipelineError
from cloudops_utils.infrastructure.session_manager import AWSRepository, aws_call

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "datapipeline_repository",
        "description": "Data Pipeline and Elasticsearch repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-17",
    }


def _field_entries(key: str, value: Any) -> list[dict[str, str]]:
    values = value if isinstance(value, list) else [value]
    entries = []
    for item in values:
        if isinstance(item, dict) and "ref" in item:
            entries.append({"key": key, "refValue": item["ref"]})
        else:
            entries.append({"key": key, "stringValue": str(item)})
    return entries


def objects_to_api(objects: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Convert definition-file objects to ``PipelineObject`` entries.

    Every key other than ``id`` and ``name`` becomes a field. ``{"ref": x}``
    values become reference fields and lists become repeated fields.

    Raises:
        ValueError: If an object has no ``id``
    """
    converted = []
    for obj in objects:
        if "id" not in obj:
            raise ValueError(f"Pipeline object is missing an id: {obj}")
        fields = []
        for key, value in obj.items():
            if key not in ("id", "name"):
                fields.extend(_field_entries(key, value))
        converted.append({"id": obj["id"], "name": obj.get("name", obj["id"]), "fields": fields})
    return converted


def parameters_to_api(parameters: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Convert definition-file parameters to ``ParameterObject`` entries."""
    converted = []
    for parameter in parameters:
        if "id" not in parameter:
            raise ValueError(f"Pipeline parameter is missing an id: {parameter}")
        attributes = []
        for key, value in parameter.items():
            if key == "id":
                continue
            for item in value if isinstance(value, list) else [value]:
                attributes.append({"key": key, "stringValue": str(item)})
        converted.append({"id": parameter["id"], "attributes": attributes})
    return converted


def values_to_api(values: dict[str, Any]) -> list[dict[str, str]]:
    """Convert a parameter-values mapping to ``ParameterValue`` entries.

    Accepts either the bare mapping or a document with a ``values`` key.
    """
    mapping = values.get("values", values)
    converted = []
    for parameter_id, value in mapping.items():
        for item in value if isinstance(value, list) else [value]:
            converted.append({"id": parameter_id, "stringValue": str(item)})
    return converted


class DataPipelineRepository(AWSRepository):
    """Repository for AWS Data Pipeline."""

    service_name = "datapipeline"

    @aws_call
    def create_pipeline(self, config: dict[str, Any]) -> str:
        """Create a pipeline from a ``CreatePipeline`` request document.

        Returns:
            Pipeline ID

        Raises:
            PipelineError: If no pipeline ID is returned
        """
        response = self._client().create_pipeline(**config)
        pipeline_id = response.get("pipelineId")
        if not pipeline_id:
            logger.critical("Could not create pipeline")
            raise PipelineError("Could not create pipeline")
        return pipeline_id

    @aws_call
    def put_definition(
        self,
        pipeline_id: str,
        definition: dict[str, Any],
        parameter_objects: list[dict[str, Any]] | None = None,
        parameter_values: list[dict[str, Any]] | dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Upload a pipeline definition.

        The definition is either an API request document (``pipelineObjects``,
        ``parameterObjects``, ``parameterValues``) or a definition file in the
        ``aws datapipeline`` format (``objects``, ``parameters``, ``values``),
        which is converted first.

        Args:
            pipeline_id: Pipeline ID
            definition: API document or definition file
            parameter_objects: Parameter object declarations in API form
            parameter_values: Values in API form, or a parameter-values file

        Returns:
            API response (validation errors and warnings)

        Raises:
            ValueError: If the definition holds no pipeline objects
            PipelineError: If the definition was rejected
        """
        if "pipelineObjects" in definition:
            objects = definition["pipelineObjects"]
            parameter_objects = parameter_objects or definition.get("parameterObjects")
            parameter_values = parameter_values or definition.get("parameterValues")
        elif "objects" in definition:
            objects = objects_to_api(definition["objects"])
            if not parameter_objects and definition.get("parameters"):
                parameter_objects = parameters_to_api(definition["parameters"])
            if not parameter_values and definition.get("values"):
                parameter_values = values_to_api(definition["values"])
        else:
            raise ValueError("Pipeline definition has neither pipelineObjects nor objects")

        if isinstance(parameter_values, dict):
            parameter_values = values_to_api(parameter_values)

        params: dict[str, Any] = {"pipelineId": pipeline_id, "pipelineObjects": objects}
        if parameter_objects:
            params["parameterObjects"] = parameter_objects
        if parameter_values:
            params["parameterValues"] = parameter_values

        response = self._client().put_pipeline_definition(**params)
        if response.get("errored", True):
            logger.critical("Pipeline definition did not work as expected")
            logger.critical(str(response.get("validationErrors", [])))
            raise PipelineError(f"Pipeline definition for {pipeline_id} was rejected")

        logger.info("Pipeline definition update successful")
        return response


class ElasticsearchRepository(AWSRepository):
    """Repository for Elasticsearch domains."""

    service_name = "es"

    @aws_call
    def update_domain(self, domain_name: str, config: dict[str, Any]) -> None:
        """Apply an ``UpdateElasticsearchDomainConfig`` request document."""
        self._client().update_elasticsearch_domain_config(**{**config, "DomainName": domain_name})


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
