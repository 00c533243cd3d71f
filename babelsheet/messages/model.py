from typing import Dict, List, Mapping, Optional

MessageKey = str
Message = Optional[str]
Language = str
MsgFilePath = str

# insertion order = order in the source file
Messages = Mapping[MessageKey, Message]
TranslationBundles = Dict[Language, Messages]

SheetRow = List[Optional[str]]
