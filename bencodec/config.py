# *************************解码设置************************
MAX_DEPTH = 256  # type: int
'''列表和字典最多嵌套的层数，超过会抛出 NestingTooDeep
递归下降解析，嵌套太深会耗尽调用栈，正常的种子文件不会超过十层'''
READ_CHUNK_SIZE = 64 * 1024  # type: int
'读取字符串内容时单次 read() 的最大字节数，防止长度前缀过大时一次性分配内存'

# *************************日志设置************************
LOG_PATH = ''  # type: str
'bencode-dump 的日志文件，为空则只输出到 stderr'
LOG_LEVEL = 'DEBUG'  # type: str
'日志文件记录的最低等级'
LOG_ROTATION = '2 MB'  # type: str
'日志文件超过这个大小后轮换'
