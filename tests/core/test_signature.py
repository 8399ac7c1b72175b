# tests/core/test_signature.py
"""
Signature 单元测试

覆盖：
1. 构造（空签名、描述、字段规范化）
2. 追加字段（顺序、失败时列表不变、重复检测）
3. clone() 的独立性与追加字段保留
4. 自定义语法解析器注入
"""
import pytest

from sigil.core.exceptions import ErrorCode, SchemaError, SignatureSyntaxError
from sigil.core.signature import (
    FieldKind,
    FieldType,
    ParsedSignature,
    RawField,
    Signature,
)


class TestConstruction:

    def test_empty_source_rejected(self):
        with pytest.raises(SchemaError) as exc:
            Signature("")
        assert exc.value.code is ErrorCode.SIGNATURE_REQUIRED

    def test_fields_normalized(self, qa_signature):
        inputs = qa_signature.get_input_fields()
        outputs = qa_signature.get_output_fields()

        assert [f.title for f in inputs] == ["Question", "Context"]
        assert inputs[1].description == "supporting passages"
        assert [f.name for f in outputs] == ["answer", "confidence"]
        assert outputs[0].type is None
        assert outputs[1].type == FieldType(kind=FieldKind.NUMBER)

    def test_description_and_source(self, qa_signature):
        assert qa_signature.get_description() == "Answer the question using the context."
        assert qa_signature.source_text.startswith("question, context")

    def test_description_optional(self):
        assert Signature("a -> b").get_description() is None

    def test_parser_errors_are_fatal(self):
        with pytest.raises(SignatureSyntaxError):
            Signature("no arrow here")

    def test_underscore_field_name_rejected(self):
        with pytest.raises(SchemaError) as exc:
            Signature("q -> _")
        assert exc.value.code is ErrorCode.FIELD_INVALID

    def test_unsupported_type_in_source(self):
        with pytest.raises(SchemaError) as exc:
            Signature("q -> when:date")
        assert exc.value.code is ErrorCode.FIELD_TYPE_UNSUPPORTED

    def test_accessors_return_read_only_views(self, qa_signature):
        outputs = qa_signature.get_output_fields()
        assert isinstance(outputs, tuple)
        with pytest.raises(AttributeError):
            outputs.append(None)  # type: ignore[attr-defined]

    def test_accessors_return_snapshots(self, qa_signature):
        snapshot = qa_signature.get_output_fields()
        qa_signature.add_output_field({"name": "extra"})
        assert len(snapshot) == 2
        assert len(qa_signature.get_output_fields()) == 3

    def test_custom_parser_called_once(self):
        calls = []

        def parser(source: str) -> ParsedSignature:
            calls.append(source)
            return ParsedSignature(
                inputs=[RawField(name="doc")],
                outputs=[RawField(name="label", title="Label")],
            )

        sig = Signature("custom grammar", parser=parser)
        assert calls == ["custom grammar"]
        assert [f.name for f in sig.get_output_fields()] == ["label"]

        sig.clone()
        assert calls == ["custom grammar", "custom grammar"]


class TestAppend:

    def test_append_preserves_order(self, qa_signature):
        qa_signature.add_output_field({"name": "sources", "type": {"kind": "string", "is_array": True}})
        qa_signature.add_input_field({"name": "audience"})

        assert [f.name for f in qa_signature.get_output_fields()] == [
            "answer",
            "confidence",
            "sources",
        ]
        assert qa_signature.get_input_fields()[-1].title == "Audience"

    def test_append_returns_normalized_spec(self, qa_signature):
        spec = qa_signature.add_output_field({"name": "final_note"})
        assert spec.title == "Final note"

    def test_empty_name_leaves_list_unchanged(self, qa_signature):
        before = qa_signature.get_output_fields()
        with pytest.raises(SchemaError):
            qa_signature.add_output_field({"name": ""})
        assert qa_signature.get_output_fields() == before

    def test_empty_kind_rejected(self, qa_signature):
        before = qa_signature.get_input_fields()
        with pytest.raises(SchemaError) as exc:
            qa_signature.add_input_field({"name": "n", "type": {"kind": ""}})
        assert "Field type name is required: n" in str(exc.value)
        assert qa_signature.get_input_fields() == before

    def test_duplicate_title_rejected_when_strict(self, qa_signature):
        before = qa_signature.get_output_fields()
        with pytest.raises(SchemaError) as exc:
            qa_signature.add_output_field({"name": "final", "title": "Answer"})
        assert exc.value.code is ErrorCode.DUPLICATE_FIELD
        assert qa_signature.get_output_fields() == before

    def test_duplicate_name_rejected_when_strict(self, qa_signature):
        with pytest.raises(SchemaError):
            qa_signature.add_output_field({"name": "answer", "title": "Another"})

    def test_same_name_in_different_lists_allowed(self, qa_signature):
        qa_signature.add_input_field({"name": "answer"})
        assert qa_signature.get_input_fields()[-1].name == "answer"

    def test_duplicates_permitted_when_not_strict(self):
        sig = Signature("q -> answer", strict=False)
        sig.add_output_field({"name": "answer"})
        assert len(sig.get_output_fields()) == 2

    def test_duplicate_in_source_rejected(self):
        with pytest.raises(SchemaError):
            Signature("q -> value, Value", strict=True)


class TestClone:

    def test_clone_equal_at_clone_time(self, qa_signature):
        qa_signature.add_output_field({"name": "extra"})
        clone = qa_signature.clone()

        assert clone is not qa_signature
        assert clone.get_input_fields() == qa_signature.get_input_fields()
        assert clone.get_output_fields() == qa_signature.get_output_fields()
        assert clone.get_description() == qa_signature.get_description()
        assert clone.source_text == qa_signature.source_text
        # 构造后追加的字段在克隆体中保留
        assert clone.get_output_fields()[-1].name == "extra"

    def test_clone_mutation_does_not_affect_original(self, qa_signature):
        original = qa_signature.get_output_fields()
        clone = qa_signature.clone()

        clone.add_output_field({"name": "reasoning"})

        assert qa_signature.get_output_fields() == original
        assert len(clone.get_output_fields()) == len(original) + 1

    def test_original_mutation_does_not_affect_clone(self, qa_signature):
        clone = qa_signature.clone()
        qa_signature.add_input_field({"name": "persona"})
        assert "persona" not in [f.name for f in clone.get_input_fields()]

    def test_clone_keeps_strict_mode(self):
        sig = Signature("q -> a", strict=False)
        clone = sig.clone()
        assert clone.strict is False
        clone.add_output_field({"name": "a"})

    def test_repr(self, qa_signature):
        assert repr(qa_signature) == "Signature(question, context -> answer, confidence)"
