from coredrills.merkle import MerkleTree, hash_block

ORIGINAL = ["blockA", "blockB", "blockC", "blockD"]
MODIFIED = ["blockA", "blockB_modified", "blockC", "blockD"]
REORDERED = ["blockD", "blockB", "blockC", "blockA"]


def test_hash_block_known_digests():
    assert hash_block("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert hash_block(b"abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_hash_block_text_equals_utf8_bytes():
    assert hash_block("blockA") == hash_block("blockA".encode("utf-8"))


def test_empty_tree_has_empty_root():
    assert MerkleTree([]).root_hash == ""


def test_single_block_root_is_its_hash():
    assert MerkleTree(["blockA"]).root_hash == hash_block("blockA")


def test_two_blocks_root_hashes_concatenation():
    ha, hb = hash_block("x"), hash_block("y")
    assert MerkleTree(["x", "y"]).root_hash == hash_block(ha + hb)


def test_odd_level_pairs_last_with_itself():
    assert MerkleTree(["a", "b", "c"]).root_hash == MerkleTree(["a", "b", "c", "c"]).root_hash


def test_verify_original_succeeds():
    assert MerkleTree(ORIGINAL).verify(ORIGINAL) is True


def test_verify_modified_fails():
    assert MerkleTree(ORIGINAL).verify(MODIFIED) is False


def test_reordering_changes_root():
    assert MerkleTree(ORIGINAL).root_hash != MerkleTree(REORDERED).root_hash
    assert MerkleTree(ORIGINAL).verify(REORDERED) is False


def test_root_is_deterministic():
    assert MerkleTree(ORIGINAL).root_hash == MerkleTree(list(ORIGINAL)).root_hash