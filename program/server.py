from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional

from tac.base_generator import TACGenerationError
from tac.pipeline import process_expression, derive_views

app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class AnalyzeRequest(BaseModel):
    expression: str
    result_var: str = "result"  # variable receiving the final value

class Diagnostic(BaseModel):
    kind: str               # "tac"
    message: str

class IndirectTriplesInfo(BaseModel):
    pointer_table: List[str]
    instruction_table: List[str]

class TACInfo(BaseModel):
    code: List[str]           # TAC lines, in emission order
    quadruples: List[str]
    triples: List[str]
    indirect_triples: IndirectTriplesInfo
    instruction_count: int
    temporaries_used: int

class AnalyzeResponse(BaseModel):
    ok: bool
    diagnostics: List[Diagnostic]
    tac: Optional[TACInfo] = None

@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeRequest):
    diagnostics: List[Diagnostic] = []
    tac_info: Optional[TACInfo] = None

    try:
        instructions = process_expression(req.expression, req.result_var)
    except TACGenerationError as e:
        diagnostics.append(Diagnostic(kind="tac", message=f"TAC generation error: {str(e)}"))
        return AnalyzeResponse(ok=False, diagnostics=diagnostics)

    views = derive_views(instructions)
    tac_info = TACInfo(
        code=views.tac,
        quadruples=views.quadruples,
        triples=views.triples,
        indirect_triples=IndirectTriplesInfo(
            pointer_table=views.indirect_triples.pointer_table,
            instruction_table=views.indirect_triples.instruction_table,
        ),
        instruction_count=views.instruction_count,
        temporaries_used=views.temporaries_used,
    )

    return AnalyzeResponse(ok=True, diagnostics=diagnostics, tac=tac_info)
