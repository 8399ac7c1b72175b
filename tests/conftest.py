# tests/conftest.py
import os

import pytest

from sigil.config import reset_settings
from sigil.core.signature import Signature


@pytest.fixture(autouse=True)
def clean_settings():
    """
    自动清理配置单例与 SIGIL_ 环境变量，
    确保每个测试都在默认配置下运行，避免相互污染。
    """
    reset_settings()
    old_environ = dict(os.environ)
    for key in list(os.environ.keys()):
        if key.startswith("SIGIL_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(old_environ)
    reset_settings()


@pytest.fixture
def qa_signature() -> Signature:
    """问答签名：一个未声明类型的输出 + 一个 number 输出"""
    return Signature(
        'question, context "supporting passages" -> answer, confidence:number',
        description="Answer the question using the context.",
    )
