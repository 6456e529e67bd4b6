from icon_gen import create_icon_image


def test_empty_selection_icon():
    img = create_icon_image(0)
    assert img.size == (64, 64)
    assert img.mode == "RGBA"
    assert img.getpixel((0, 0))[3] == 0  # rounded corner stays transparent
    assert img.getpixel((10, 32)) == (255, 255, 255, 255)


def test_count_icon_uses_accent_fill():
    img = create_icon_image(3, accent="#0078D4")
    assert img.getpixel((10, 32)) == (0, 120, 212, 255)


def test_large_counts_render():
    img = create_icon_image(250)
    assert img.size == (64, 64)
