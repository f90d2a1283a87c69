# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from pytest import fixture

from treematch.config import Namespace


@fixture
def config():
    """A match config independent of any config files on disk"""
    return Namespace({
        'log_level': 'INFO',
        'use_color': False,
        'warn_overlapping_allow_paths': True,
    })


@fixture
def deployment():
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {
            "name": "foo",
            "namespace": "default",
            "uid": "abc",
            "resourceVersion": "1",
            "generation": 1,
            "labels": {"app": "foo"},
        },
        "spec": {
            "replicas": 3,
            "template": {
                "spec": {
                    "containers": [{"name": "foo", "image": "foo:1.0"}],
                },
            },
        },
    }


@fixture
def server_deployment(deployment):
    """deployment as the api server would return it"""
    d = copy.deepcopy(deployment)
    d["metadata"].update({
        "uid": "xyz",
        "resourceVersion": "42",
        "generation": 2,
        "creationTimestamp": "2021-01-01T00:00:00Z",
        "managedFields": [{"manager": "kubectl"}],
    })
    d["status"] = {"replicas": 3}
    return d
