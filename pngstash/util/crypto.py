from ..lib.exceptions import DecryptionError
from cryptography.fernet import Fernet
from cryptography.fernet import InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
import base64
import binascii
import os


SALT_LEN = 16
KDF_ITERATIONS = 100000
# separates the base64 salt from the fernet token in an encrypted message.
# Neither of them can contain it.
TOKEN_SEP = '$'


def gen_salt():
    return os.urandom(SALT_LEN)


def read_key_file(fname):
    ''' The whole content of the key file is the passphrase '''
    with open(fname, 'rb') as fd:
        return fd.read()


def gen_key(password, salt=None):
    ''' Derive a Fernet from the password. If no salt, generate a random
    one. Returns the salt and the Fernet. '''
    assert isinstance(password, bytes)
    salt = gen_salt() if salt is None else salt
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=32,
        salt=salt,
        iterations=KDF_ITERATIONS,
    )
    # Fernet wants it in base 64
    key = base64.urlsafe_b64encode(kdf.derive(password))
    return salt, Fernet(key)


def encrypt_message(password, message):
    ''' Encrypt message with a key derived from password and a fresh salt.
    The result is ASCII text carrying the salt in front of the token, so it
    can go straight into a chunk and still be read back as a string. '''
    salt, fernet = gen_key(password)
    token = fernet.encrypt(bytes(message, 'utf-8'))
    return '{}{}{}'.format(
        str(base64.urlsafe_b64encode(salt), 'ascii'), TOKEN_SEP,
        str(token, 'ascii'))


def decrypt_message(password, text):
    ''' Undo encrypt_message. Raises DecryptionError if the text doesn't look
    like something we encrypted or if the password is wrong. '''
    salt, sep, token = text.partition(TOKEN_SEP)
    if not sep:
        raise DecryptionError('Message does not appear to be encrypted')
    try:
        salt = base64.urlsafe_b64decode(salt)
    except (binascii.Error, ValueError):
        raise DecryptionError('Message has a malformed salt')
    _, fernet = gen_key(password, salt=salt)
    try:
        d = fernet.decrypt(bytes(token, 'ascii'))
    except (InvalidToken, UnicodeEncodeError):
        raise DecryptionError('Passphrase appears to be incorrect')
    try:
        return str(d, 'utf-8')
    except UnicodeDecodeError:
        raise DecryptionError('Decrypted message is not UTF-8')
