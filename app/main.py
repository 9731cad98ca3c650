import logging

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, StrictStr

from app.config import Settings, get_settings
from exprtree.analyzer import analyze
from exprtree.ast_utils import tree_to_infix, tree_to_json, tree_to_pretty
from exprtree.errors import ExpressionError
from exprtree.lowering import build_trees

logger = logging.getLogger(__name__)

app = FastAPI(title="Expression Parse Tree")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

class ParseBody(BaseModel):
    expression: StrictStr


def _build(body: ParseBody, settings: Settings):
    try:
        return build_trees(body.expression, allow_trailing=settings.allow_trailing)
    except ExpressionError as e:
        logger.info("rejected expression %r: %s", body.expression, e)
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/parse")
def parse(body: ParseBody, settings: Settings = Depends(get_settings)):
    tree, ast = _build(body, settings)
    # trees can nest deeper than the default JSON encoder allows
    content = '{"parseTree": %s, "ast": %s}' % (tree_to_json(tree), tree_to_json(ast))
    return Response(content=content, media_type="application/json")

@app.post("/inspect")
def inspect(body: ParseBody, settings: Settings = Depends(get_settings)):
    _, ast = _build(body, settings)
    meta = analyze(ast)
    return {
        "ok": True,
        "pretty": tree_to_pretty(ast),
        "infix": tree_to_infix(ast),
        "literals": meta.literals,
        "functions": sorted(meta.functions),
        "operators": sorted(meta.operators),
        "depth": meta.depth,
    }


def main():
    import uvicorn
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
