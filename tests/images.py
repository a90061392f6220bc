from PIL import Image


def two_block_image(width, height, left=(255, 0, 0, 255), right=(0, 0, 255, 255)):
    """RGBA image split vertically into two flat color blocks."""
    img = Image.new("RGBA", (width, height), right)
    img.paste(left, (0, 0, width // 2, height))
    return img


def gradient_image(width, height):
    """Red-to-blue sweep across, green ramp down."""
    img = Image.new("RGB", (width, height))
    img.putdata(
        [
            (int(255 * x / width), int(255 * y / height), 255 - int(255 * x / width))
            for y in range(height)
            for x in range(width)
        ]
    )
    return img
