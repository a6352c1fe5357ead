from formbuilder.models import Form


def test_file_blocks_across_steps():
    form = Form(
        steps=[
            {"blocks": [{"name": "name", "type": "TextInput"}]},
            {
                "blocks": [
                    {"name": "cv", "type": "FileInput"},
                    {"name": "photo", "type": "ImageInput"},
                    {"name": "sign", "type": "SignatureInput"},
                ],
            },
            {},
        ],
    )
    assert [block["name"] for block in form.iter_blocks()] == ["name", "cv", "photo", "sign"]
    assert [block["name"] for block in form.file_blocks()] == ["cv", "photo", "sign"]


def test_form_without_steps():
    assert Form(steps=None).file_blocks() == []
