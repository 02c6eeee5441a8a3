# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

from pytest import fixture

import lcsdiff.log

from .utils import write_lines, write_json


@fixture
def linefiles(tmpdir):
    """Fixture writing a base and remote text file into a temporary directory"""
    base = write_lines(str(tmpdir.join('base.txt')), ["a", "b", "c"])
    remote = write_lines(str(tmpdir.join('remote.txt')), ["b", "c", "d"])
    return base, remote


@fixture
def jsonfiles(tmpdir):
    """Fixture writing a base and remote JSON array into a temporary directory"""
    base = write_json(str(tmpdir.join('base.json')), [1, 2, 3, 4])
    remote = write_json(str(tmpdir.join('remote.json')), [4, 2, 3, 5])
    return base, remote


@fixture(autouse=True)
def reset_log_level():
    level = lcsdiff.log.logger.level
    root_level = logging.getLogger().level
    yield
    lcsdiff.log.logger.setLevel(level)
    logging.getLogger().setLevel(root_level)


@fixture
def isolated_config(tmpdir, monkeypatch):
    """Run in an empty directory with no jupyter config dirs on the path"""
    monkeypatch.setenv('JUPYTER_CONFIG_DIR', str(tmpdir.join('jupyter-config')))
    monkeypatch.setenv('JUPYTER_CONFIG_PATH', '')
    monkeypatch.setenv('JUPYTER_NO_CONFIG', '1')
    monkeypatch.chdir(str(tmpdir))
    return tmpdir
