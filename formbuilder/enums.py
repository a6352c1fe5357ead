from django.db import models


class BlockType(models.TextChoices):
    TEXT_INPUT = "TextInput", "Text Input"
    TEXTAREA = "TextareaInput", "Textarea"
    EMAIL_INPUT = "EmailInput", "Email Input"
    NUMBER_INPUT = "NumberInput", "Number Input"
    CHECKBOX = "CheckboxInput", "Checkbox"
    FILE_INPUT = "FileInput", "File Upload"
    IMAGE_INPUT = "ImageInput", "Image Upload"
    SIGNATURE_INPUT = "SignatureInput", "Signature"


# Blocks whose submitted value is a comma-separated list of uploaded file ids
FILE_BLOCK_TYPES = frozenset(
    {
        BlockType.FILE_INPUT.value,
        BlockType.IMAGE_INPUT.value,
        BlockType.SIGNATURE_INPUT.value,
    },
)
