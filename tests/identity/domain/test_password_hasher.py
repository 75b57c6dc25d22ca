from storefront.identity.passwords import (
    BcryptPasswordHasher,
    PasswordHasher,
    get_hasher,
    reset_hasher,
    set_hasher,
)


class TestBcryptPasswordHasher:
    def test_hash_is_not_plain_text(self):
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("s3cret-pass")
        assert hashed != "s3cret-pass"
        assert hashed.startswith("$2")

    def test_verify_round_trip(self):
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("s3cret-pass")
        assert hasher.verify("s3cret-pass", hashed)
        assert not hasher.verify("wrong-pass", hashed)

    def test_same_password_hashes_differently(self):
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash("s3cret-pass") != hasher.hash("s3cret-pass")


class ReversedHasher(PasswordHasher):
    def hash(self, password):
        return password[::-1]

    def verify(self, password, hashed):
        return password[::-1] == hashed


class TestHasherRegistry:
    def test_default_is_bcrypt(self):
        reset_hasher()
        assert isinstance(get_hasher(), BcryptPasswordHasher)

    def test_set_hasher_replaces_active_hasher(self):
        hasher = ReversedHasher()
        set_hasher(hasher)
        assert get_hasher() is hasher
