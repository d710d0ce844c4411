import base64
import binascii
import threading
from datetime import datetime

from cryptography.fernet import Fernet
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

DEFAULT_SALT = b'\x13\x98\x88\xfa\xb4\xde'


class Logger:
    def __init__(self, password: str, log_path: str, salt: str = None):
        self.salt = binascii.unhexlify(salt) if salt else DEFAULT_SALT
        self.fernet = self._gerar_fernet(password)
        self.log_lock = threading.Lock()
        self.log_file = log_path

    def _gerar_fernet(self, password: str):
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=self.salt,
            iterations=100000,
        )
        key = base64.urlsafe_b64encode(kdf.derive(password.encode()))
        return Fernet(key)

    def log(self, acao, status, detalhes="Sem Detalhes"):
        with self.log_lock:
            try:
                timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
                log_entry = f"[{timestamp}] {acao} - {status} - {detalhes}\n"

                log_cifrado = self.fernet.encrypt(log_entry.encode('utf-8'))

                with open(self.log_file, 'ab') as f:
                    f.write(log_cifrado + b'\n')
            except OSError as e:
                print(f"Erro ao registar log: {e}")

    def read_logs(self):
        ret = ""
        with open(self.log_file, 'rb') as f:
            for linha in f:
                linha = linha.strip()
                if not linha:
                    continue
                ret += self.fernet.decrypt(linha).decode('utf-8')
        return ret
