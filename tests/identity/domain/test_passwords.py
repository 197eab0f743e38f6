from storefront.identity.auth.passwords import hash_password, verify_password


def test_hash_is_salted_and_verifiable():
    first = hash_password("123456")
    second = hash_password("123456")

    assert first != second
    assert verify_password("123456", first)
    assert verify_password("123456", second)


def test_wrong_password_fails():
    assert not verify_password("654321", hash_password("123456"))


def test_missing_inputs_fail():
    assert not verify_password("", hash_password("123456"))
    assert not verify_password("123456", None)
